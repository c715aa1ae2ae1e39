"""Tests for ClientInstrumentation — observer lifecycle and log level changes."""

import pytest

from g2mock.client.domain.operation import Operation
from g2mock.client.domain.settings import ClientSettings
from g2mock.client.infrastructure.instrumentation import ClientInstrumentation
from g2mock.core.errors import LogLevelError, ObserverRegistrationError
from g2mock.messagelog.domain.level import LogLevel
from g2mock.messagelog.infrastructure.structlog_logger import StructlogMessageLogger
from tests.messagelog.fake_logger import FakeMessageLogger
from tests.observer.fake_observer import FakeObserver

_CALL = Operation(
    name="call", event_id=7001, trace_entry=1, trace_exit=2, details={"x": "x"}
)
_REGISTER = Operation(
    name="register_observer", event_id=7002, trace_entry=3, trace_exit=4
)
_UNREGISTER = Operation(
    name="unregister_observer", event_id=7003, trace_entry=5, trace_exit=6
)
_SET_LOG_LEVEL = Operation(
    name="set_log_level", event_id=7004, trace_entry=7, trace_exit=8
)


def _make_instrumentation(
    log_level: LogLevel = LogLevel.INFO,
) -> tuple[ClientInstrumentation, FakeMessageLogger]:
    logger = FakeMessageLogger(level=log_level)
    instrumentation = ClientInstrumentation(
        component="test",
        component_id=7000,
        settings=ClientSettings(log_level=log_level),
        logger=logger,
    )
    return instrumentation, logger


class TestClientInstrumentationDefaults:
    """A fresh instrumentation has no observers and follows its settings."""

    def test_starts_without_observers(self) -> None:
        instrumentation, _ = _make_instrumentation()
        assert instrumentation.has_observers() is False

    def test_tracing_follows_settings(self) -> None:
        assert _make_instrumentation(LogLevel.TRACE)[0].is_trace is True
        assert _make_instrumentation(LogLevel.DEBUG)[0].is_trace is False

    def test_injected_trace_logger_turns_tracing_on(self) -> None:
        instrumentation = ClientInstrumentation(
            component="test",
            component_id=7000,
            logger=FakeMessageLogger(level=LogLevel.TRACE),
        )

        assert instrumentation.is_trace is True

    def test_explicit_settings_set_injected_logger_level(self) -> None:
        logger = FakeMessageLogger(level=LogLevel.TRACE)
        instrumentation = ClientInstrumentation(
            component="test",
            component_id=7000,
            settings=ClientSettings(log_level=LogLevel.WARN),
            logger=logger,
        )

        assert instrumentation.is_trace is False
        assert logger.get_log_level() is LogLevel.WARN

    def test_identity_properties(self) -> None:
        instrumentation, _ = _make_instrumentation()
        assert instrumentation.component == "test"
        assert instrumentation.component_id == 7000

    def test_default_logger_is_created_lazily_at_settings_level(self) -> None:
        instrumentation = ClientInstrumentation(
            component="test",
            component_id=7000,
            settings=ClientSettings(log_level=LogLevel.WARN),
        )

        logger = instrumentation.get_logger()

        assert isinstance(logger, StructlogMessageLogger)
        assert logger.get_log_level() is LogLevel.WARN
        assert instrumentation.get_logger() is logger

    async def test_notify_without_registry_is_noop(self) -> None:
        instrumentation, _ = _make_instrumentation()

        instrumentation.notify(_CALL, {"x": "1"})
        await instrumentation.drain_notifications()


class TestRegisterObserver:
    """Registration creates the registry and announces itself."""

    async def test_registered_observer_receives_own_registration(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver(observer_id="watcher")

        instrumentation.register_observer(_REGISTER, observer)
        await instrumentation.drain_notifications()

        assert instrumentation.has_observers() is True
        [notification] = observer.notifications_for(7002)
        assert notification["observerID"] == "watcher"
        assert notification["subjectId"] == "7000"

    async def test_duplicate_registration_delivers_once_per_call(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver()

        instrumentation.register_observer(_REGISTER, observer)
        instrumentation.register_observer(_REGISTER, observer)
        instrumentation.notify(_CALL, {"x": "1"})
        await instrumentation.drain_notifications()

        assert len(observer.notifications_for(7001)) == 1

    async def test_rejected_observer_raises_and_leaves_no_registry(self) -> None:
        instrumentation, _ = _make_instrumentation()

        with pytest.raises(ObserverRegistrationError):
            instrumentation.register_observer(_REGISTER, FakeObserver(observer_id=""))

        assert instrumentation.has_observers() is False

    async def test_rejection_is_announced_with_error(self) -> None:
        instrumentation, _ = _make_instrumentation()
        existing = FakeObserver(observer_id="existing")
        instrumentation.register_observer(_REGISTER, existing)

        with pytest.raises(ObserverRegistrationError):
            instrumentation.register_observer(_REGISTER, FakeObserver(observer_id=""))
        await instrumentation.drain_notifications()

        rejected = [n for n in existing.notifications_for(7002) if "error" in n]
        assert len(rejected) == 1
        assert rejected[0]["observerID"] == ""
        assert rejected[0]["error"].startswith("Failed to register observer")

    async def test_registration_is_traced_when_tracing(self) -> None:
        instrumentation, logger = _make_instrumentation(LogLevel.TRACE)

        instrumentation.register_observer(_REGISTER, FakeObserver(observer_id="w"))
        await instrumentation.drain_notifications()

        assert logger.codes() == [3, 4]
        assert logger.messages[0].details == {"observer_id": "w"}


class TestUnregisterObserver:
    """Unregistration notifies before removal and drops an empty registry."""

    async def test_leaving_observer_receives_unregistration(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver(observer_id="leaving")
        instrumentation.register_observer(_REGISTER, observer)

        instrumentation.unregister_observer(_UNREGISTER, observer)
        await instrumentation.drain_notifications()

        [notification] = observer.notifications_for(7003)
        assert notification["observerID"] == "leaving"
        assert instrumentation.has_observers() is False

    async def test_unregister_without_registry_is_noop(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver()

        instrumentation.unregister_observer(_UNREGISTER, observer)
        await instrumentation.drain_notifications()

        assert observer.messages == []
        assert instrumentation.has_observers() is False

    async def test_second_unregister_is_noop(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver()
        instrumentation.register_observer(_REGISTER, observer)
        instrumentation.unregister_observer(_UNREGISTER, observer)

        instrumentation.unregister_observer(_UNREGISTER, observer)
        await instrumentation.drain_notifications()

        assert len(observer.notifications_for(7003)) == 1

    async def test_unknown_observer_leaves_registry_intact(self) -> None:
        instrumentation, _ = _make_instrumentation()
        registered = FakeObserver(observer_id="registered")
        instrumentation.register_observer(_REGISTER, registered)

        instrumentation.unregister_observer(
            _UNREGISTER, FakeObserver(observer_id="stranger")
        )
        instrumentation.notify(_CALL, {"x": "1"})
        await instrumentation.drain_notifications()

        assert instrumentation.has_observers() is True
        assert len(registered.notifications_for(7001)) == 1

    async def test_remaining_observer_keeps_registry_alive(self) -> None:
        instrumentation, _ = _make_instrumentation()
        staying = FakeObserver(observer_id="staying")
        leaving = FakeObserver(observer_id="leaving")
        instrumentation.register_observer(_REGISTER, staying)
        instrumentation.register_observer(_REGISTER, leaving)

        instrumentation.unregister_observer(_UNREGISTER, leaving)
        instrumentation.notify(_CALL, {"x": "1"})
        await instrumentation.drain_notifications()

        assert instrumentation.has_observers() is True
        assert len(staying.notifications_for(7001)) == 1
        assert leaving.notifications_for(7001) == []


class TestSetLogLevel:
    """Tracing is on exactly when the level is TRACE."""

    async def test_trace_turns_tracing_on(self) -> None:
        instrumentation, logger = _make_instrumentation()

        instrumentation.set_log_level(_SET_LOG_LEVEL, LogLevel.TRACE)

        assert instrumentation.is_trace is True
        assert logger.get_log_level() is LogLevel.TRACE
        assert logger.codes() == [8]

    async def test_other_level_turns_tracing_off(self) -> None:
        instrumentation, logger = _make_instrumentation(LogLevel.TRACE)

        instrumentation.set_log_level(_SET_LOG_LEVEL, LogLevel.ERROR)

        assert instrumentation.is_trace is False
        assert logger.codes() == [7]

    async def test_observers_hear_new_level(self) -> None:
        instrumentation, _ = _make_instrumentation()
        observer = FakeObserver()
        instrumentation.register_observer(_REGISTER, observer)

        instrumentation.set_log_level(_SET_LOG_LEVEL, LogLevel.DEBUG)
        await instrumentation.drain_notifications()

        [notification] = observer.notifications_for(7004)
        assert notification["logLevel"] == "DEBUG"

    async def test_level_name_is_accepted(self) -> None:
        instrumentation, logger = _make_instrumentation()
        observer = FakeObserver()
        instrumentation.register_observer(_REGISTER, observer)

        instrumentation.set_log_level(_SET_LOG_LEVEL, "trace")
        await instrumentation.drain_notifications()

        assert instrumentation.is_trace is True
        assert logger.get_log_level() is LogLevel.TRACE
        [notification] = observer.notifications_for(7004)
        assert notification["logLevel"] == "TRACE"

    async def test_unknown_level_name_changes_nothing(self) -> None:
        instrumentation, logger = _make_instrumentation(LogLevel.TRACE)
        observer = FakeObserver()
        instrumentation.register_observer(_REGISTER, observer)
        logger.messages.clear()

        with pytest.raises(LogLevelError):
            instrumentation.set_log_level(_SET_LOG_LEVEL, "LOUD")
        await instrumentation.drain_notifications()

        assert instrumentation.is_trace is True
        assert logger.get_log_level() is LogLevel.TRACE
        assert logger.messages == []
        assert observer.notifications_for(7004) == []
