"""ClientInstrumentation — tracing, notifications and observers of one client."""

import time
from collections.abc import Mapping

from g2mock.client.domain.operation import Operation
from g2mock.client.domain.settings import ClientSettings
from g2mock.core.errors import ObserverRegistrationError
from g2mock.messagelog.domain.level import LogLevel, coerce_level
from g2mock.messagelog.domain.logger import MessageLogger
from g2mock.messagelog.infrastructure.structlog_logger import StructlogMessageLogger
from g2mock.observer.domain.observer import Observer
from g2mock.observer.infrastructure.notifier import Notifier
from g2mock.observer.infrastructure.subject import ObserverSubject


class ClientInstrumentation:
    """Cross-cutting state owned by exactly one mock client instance.

    Holds the trace flag, the lazily created logger and the observer
    registry. The registry is either None or non-empty: it is created by the
    first registration and dropped as soon as the last observer leaves, so a
    client without observers never pays for a dispatch.

    Explicit settings set the injected logger's level; without settings an
    injected logger's own level decides whether tracing starts on.

    The trace_* helpers do not check ``is_trace``; callers do.
    """

    def __init__(
        self,
        component: str,
        component_id: int,
        settings: ClientSettings | None = None,
        logger: MessageLogger | None = None,
    ) -> None:
        self._component = component
        self._component_id = component_id
        self._logger = logger
        if settings is not None:
            if logger is not None:
                logger.set_log_level(settings.log_level)
            self._settings = settings
        elif logger is not None:
            self._settings = ClientSettings(log_level=logger.get_log_level())
        else:
            self._settings = ClientSettings()
        self._observers: ObserverSubject | None = None
        self._notifier = Notifier(subject_id=component_id)
        self.is_trace = self._settings.is_trace

    @property
    def component(self) -> str:
        return self._component

    @property
    def component_id(self) -> int:
        return self._component_id

    def get_logger(self) -> MessageLogger:
        if self._logger is None:
            self._logger = StructlogMessageLogger(
                component_id=self._component_id, level=self._settings.log_level
            )
        return self._logger

    def trace_entry(self, operation: Operation, **arguments: object) -> None:
        self.get_logger().log(
            operation.trace_entry,
            f"{self._component}.{operation.name}.entry",
            **arguments,
        )

    def trace_exit(
        self, operation: Operation, started: float, **fields: object
    ) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.get_logger().log(
            operation.trace_exit,
            f"{self._component}.{operation.name}.exit",
            **fields,
            elapsed_ms=round(elapsed_ms, 3),
        )

    def has_observers(self) -> bool:
        return self._observers is not None and self._observers.has_observers()

    def notify(
        self,
        operation: Operation,
        details: Mapping[str, str],
        error: BaseException | None = None,
    ) -> None:
        """Dispatch the notification for operation to the current observers."""
        if self._observers is None:
            return
        self._notifier.notify(
            observers=self._observers.observers(),
            event_id=operation.event_id,
            details=details,
            error=error,
        )

    async def drain_notifications(self) -> None:
        """Wait for every notification dispatched so far to be delivered."""
        await self._notifier.drain()

    def register_observer(self, operation: Operation, observer: Observer) -> None:
        """Add observer, creating the registry on first use.

        Raises:
            ObserverRegistrationError: if the registry rejects the observer.
        """
        started = time.perf_counter()
        observer_id = observer.get_observer_id()
        if self.is_trace:
            self.trace_entry(operation, observer_id=observer_id)
        if self._observers is None:
            self._observers = ObserverSubject()
        error: ObserverRegistrationError | None = None
        try:
            self._observers.register_observer(observer)
        except ObserverRegistrationError as exc:
            error = exc
        if not self._observers.has_observers():
            self._observers = None
        self.notify(operation, {"observerID": observer_id}, error=error)
        if self.is_trace:
            self.trace_exit(operation, started, observer_id=observer_id, error=error)
        if error is not None:
            raise error

    def unregister_observer(self, operation: Operation, observer: Observer) -> None:
        """Remove observer; a client without a registry treats this as a no-op."""
        started = time.perf_counter()
        observer_id = observer.get_observer_id()
        if self.is_trace:
            self.trace_entry(operation, observer_id=observer_id)
        if self._observers is not None:
            # The observer snapshot is taken here, before removal, so the
            # leaving observer still receives this notification.
            self.notify(operation, {"observerID": observer_id})
            self._observers.unregister_observer(observer)
            if not self._observers.has_observers():
                self._observers = None
        if self.is_trace:
            self.trace_exit(operation, started, observer_id=observer_id, error=None)

    def set_log_level(self, operation: Operation, log_level: LogLevel | str) -> None:
        """Change the logger level; tracing is on exactly when the level is TRACE.

        Level names are accepted case-insensitively.

        Raises:
            LogLevelError: if log_level does not name a level. Nothing is
                changed, traced or announced in that case.
        """
        log_level = coerce_level(log_level)
        started = time.perf_counter()
        if self.is_trace:
            self.trace_entry(operation, new_level=log_level)
        logger = self.get_logger()
        logger.set_log_level(log_level)
        self.is_trace = logger.get_log_level() == LogLevel.TRACE
        if self.has_observers():
            self.notify(operation, {"logLevel": log_level.value})
        if self.is_trace:
            self.trace_exit(operation, started, new_level=log_level, error=None)
