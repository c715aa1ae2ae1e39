"""G2Product Protocol — capability interface of the product information client."""

from typing import Protocol

from g2mock.messagelog.domain.level import LogLevel
from g2mock.observer.domain.observer import Observer


class G2Product(Protocol):
    """Structural interface satisfied by any product information client."""

    async def destroy(self) -> None: ...

    async def get_sdk_id(self) -> str: ...

    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None: ...

    async def license(self) -> str: ...

    async def register_observer(self, observer: Observer) -> None: ...

    async def set_log_level(self, log_level: LogLevel | str) -> None: ...

    async def unregister_observer(self, observer: Observer) -> None: ...

    async def validate_license_file(self, license_file_path: str) -> str: ...

    async def validate_license_string_base64(self, license_string: str) -> str: ...

    async def version(self) -> str: ...
