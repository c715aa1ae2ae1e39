"""ProductResults — canned results returned by the product information mock."""

from pydantic import BaseModel, ConfigDict


class ProductResults(BaseModel):
    """One writable field per data-returning operation, named after it."""

    model_config = ConfigDict(validate_assignment=True, strict=True, extra="forbid")

    license: str = ""
    validate_license_file: str = ""
    validate_license_string_base64: str = ""
    version: str = ""
