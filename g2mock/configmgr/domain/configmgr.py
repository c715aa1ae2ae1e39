"""G2ConfigMgr Protocol — capability interface of the configuration manager client."""

from typing import Protocol

from g2mock.messagelog.domain.level import LogLevel
from g2mock.observer.domain.observer import Observer


class G2ConfigMgr(Protocol):
    """Structural interface satisfied by any configuration manager client.

    Stores configuration JSON documents and tracks which one is the default.
    """

    async def add_config(self, config_str: str, config_comments: str) -> int: ...

    async def destroy(self) -> None: ...

    async def get_config(self, config_id: int) -> str: ...

    async def get_config_list(self) -> str: ...

    async def get_default_config_id(self) -> int: ...

    async def get_sdk_id(self) -> str: ...

    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None: ...

    async def register_observer(self, observer: Observer) -> None: ...

    async def replace_default_config_id(
        self, old_config_id: int, new_config_id: int
    ) -> None: ...

    async def set_default_config_id(self, config_id: int) -> None: ...

    async def set_log_level(self, log_level: LogLevel | str) -> None: ...

    async def unregister_observer(self, observer: Observer) -> None: ...
