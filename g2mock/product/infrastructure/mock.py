"""G2ProductMock — product information client returning canned results."""

from g2mock.client.domain.settings import ClientSettings
from g2mock.client.infrastructure.decorator import instrumented
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation
from g2mock.messagelog.domain.level import LogLevel
from g2mock.messagelog.domain.logger import MessageLogger
from g2mock.observer.domain.observer import Observer
from g2mock.product.domain.results import ProductResults
from g2mock.product.infrastructure import operations as ops


class G2ProductMock:
    """Satisfies the G2Product protocol with canned license and version data."""

    def __init__(
        self,
        results: ProductResults | None = None,
        settings: ClientSettings | None = None,
        logger: MessageLogger | None = None,
    ) -> None:
        self.results = results if results is not None else ProductResults()
        self.instrumentation = ClientInstrumentation(
            component=ops.COMPONENT,
            component_id=ops.COMPONENT_ID,
            settings=settings,
            logger=logger,
        )

    @instrumented(ops.DESTROY)
    async def destroy(self) -> None:
        return None

    @instrumented(ops.GET_SDK_ID)
    async def get_sdk_id(self) -> str:
        return "mock"

    @instrumented(ops.INIT)
    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None:
        return None

    @instrumented(ops.LICENSE)
    async def license(self) -> str:
        return self.results.license

    @instrumented(ops.VALIDATE_LICENSE_FILE)
    async def validate_license_file(self, license_file_path: str) -> str:
        return self.results.validate_license_file

    @instrumented(ops.VALIDATE_LICENSE_STRING_BASE64)
    async def validate_license_string_base64(self, license_string: str) -> str:
        return self.results.validate_license_string_base64

    @instrumented(ops.VERSION)
    async def version(self) -> str:
        return self.results.version

    async def register_observer(self, observer: Observer) -> None:
        self.instrumentation.register_observer(ops.REGISTER_OBSERVER, observer)

    async def unregister_observer(self, observer: Observer) -> None:
        self.instrumentation.unregister_observer(ops.UNREGISTER_OBSERVER, observer)

    async def set_log_level(self, log_level: LogLevel | str) -> None:
        self.instrumentation.set_log_level(ops.SET_LOG_LEVEL, log_level)

    def has_observers(self) -> bool:
        return self.instrumentation.has_observers()
