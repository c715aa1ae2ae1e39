"""ConfigMgrResults — canned results returned by the configuration manager mock."""

from pydantic import BaseModel, ConfigDict


class ConfigMgrResults(BaseModel):
    """One writable field per data-returning operation, named after it."""

    model_config = ConfigDict(validate_assignment=True, strict=True, extra="forbid")

    add_config: int = 0
    get_config: str = ""
    get_config_list: str = ""
    get_default_config_id: int = 0
