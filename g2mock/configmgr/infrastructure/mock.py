"""G2ConfigMgrMock — configuration manager client returning canned results."""

from g2mock.client.domain.settings import ClientSettings
from g2mock.client.infrastructure.decorator import instrumented
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation
from g2mock.configmgr.domain.results import ConfigMgrResults
from g2mock.configmgr.infrastructure import operations as ops
from g2mock.messagelog.domain.level import LogLevel
from g2mock.messagelog.domain.logger import MessageLogger
from g2mock.observer.domain.observer import Observer


class G2ConfigMgrMock:
    """Satisfies the G2ConfigMgr protocol without touching a repository.

    Set fields on ``results`` before calling a method; the method returns
    the field verbatim. Every call is traced when the log level is TRACE and
    announced to registered observers.
    """

    def __init__(
        self,
        results: ConfigMgrResults | None = None,
        settings: ClientSettings | None = None,
        logger: MessageLogger | None = None,
    ) -> None:
        self.results = results if results is not None else ConfigMgrResults()
        self.instrumentation = ClientInstrumentation(
            component=ops.COMPONENT,
            component_id=ops.COMPONENT_ID,
            settings=settings,
            logger=logger,
        )

    @instrumented(ops.ADD_CONFIG)
    async def add_config(self, config_str: str, config_comments: str) -> int:
        """Store a configuration document; returns its configuration id."""
        return self.results.add_config

    @instrumented(ops.DESTROY)
    async def destroy(self) -> None:
        return None

    @instrumented(ops.GET_CONFIG)
    async def get_config(self, config_id: int) -> str:
        return self.results.get_config

    @instrumented(ops.GET_CONFIG_LIST)
    async def get_config_list(self) -> str:
        return self.results.get_config_list

    @instrumented(ops.GET_DEFAULT_CONFIG_ID)
    async def get_default_config_id(self) -> int:
        return self.results.get_default_config_id

    @instrumented(ops.GET_SDK_ID)
    async def get_sdk_id(self) -> str:
        """Identify this implementation; always ``"mock"``."""
        return "mock"

    @instrumented(ops.INIT)
    async def init(
        self, module_name: str, ini_params: str, verbose_logging: int
    ) -> None:
        return None

    @instrumented(ops.REPLACE_DEFAULT_CONFIG_ID)
    async def replace_default_config_id(
        self, old_config_id: int, new_config_id: int
    ) -> None:
        return None

    @instrumented(ops.SET_DEFAULT_CONFIG_ID)
    async def set_default_config_id(self, config_id: int) -> None:
        return None

    async def register_observer(self, observer: Observer) -> None:
        """Add observer to the set notified about every call.

        Raises:
            ObserverRegistrationError: if the observer has an empty id.
        """
        self.instrumentation.register_observer(ops.REGISTER_OBSERVER, observer)

    async def unregister_observer(self, observer: Observer) -> None:
        self.instrumentation.unregister_observer(ops.UNREGISTER_OBSERVER, observer)

    async def set_log_level(self, log_level: LogLevel | str) -> None:
        self.instrumentation.set_log_level(ops.SET_LOG_LEVEL, log_level)

    def has_observers(self) -> bool:
        return self.instrumentation.has_observers()
