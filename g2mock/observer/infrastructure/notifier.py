"""Notifier — builds JSON call notifications and delivers them without blocking."""

import asyncio
import json
import sys
import time
from collections.abc import Iterable, Mapping
from typing import TypeAlias

import structlog

from g2mock.observer.domain.observer import Observer

NotificationDetails: TypeAlias = Mapping[str, str]


class Notifier:
    """Publishes call notifications for one capability group.

    Every message is a flat JSON object of strings: the operation-specific
    details plus ``subjectId``, ``messageId``, ``messageTime`` (nanoseconds
    since the epoch) and, when an error is passed, ``error``.

    Delivery is fire-and-forget: ``dispatch`` schedules a task on the running
    loop and returns immediately. Each task works on the observer snapshot
    it was given, so later registry changes never affect it. Neither the
    order of delivery across observers nor across successive dispatches is
    guaranteed.
    """

    def __init__(self, subject_id: int) -> None:
        self._subject_id = subject_id
        self._pending: set[asyncio.Task[None]] = set()
        self._log = structlog.get_logger()

    @property
    def subject_id(self) -> int:
        return self._subject_id

    def build_message(
        self,
        event_id: int,
        details: NotificationDetails,
        error: BaseException | None = None,
    ) -> str:
        """Return the JSON notification for one call.

        Raises:
            TypeError: if a detail value cannot be serialised.
        """
        message = dict(details)
        message["subjectId"] = str(self._subject_id)
        message["messageId"] = str(event_id)
        message["messageTime"] = str(time.time_ns())
        if error is not None:
            message["error"] = str(error)
        return json.dumps(message)

    def dispatch(self, observers: Iterable[Observer], message: str) -> None:
        """Schedule delivery of message to every observer and return at once."""
        snapshot = tuple(observers)
        if not snapshot:
            return
        task = asyncio.get_running_loop().create_task(
            self._deliver(snapshot, message)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def notify(
        self,
        observers: Iterable[Observer],
        event_id: int,
        details: NotificationDetails,
        error: BaseException | None = None,
    ) -> None:
        """Build the notification for event_id and dispatch it.

        A message that cannot be serialised is reported on stderr and dropped.
        """
        try:
            message = self.build_message(
                event_id=event_id, details=details, error=error
            )
        except (TypeError, ValueError) as exc:
            sys.stderr.write(f"Error: {exc}\n")
            return
        self.dispatch(observers, message)

    async def drain(self) -> None:
        """Wait until every delivery scheduled so far has finished."""
        while self._pending:
            await asyncio.gather(*self._pending)

    def pending_count(self) -> int:
        return len(self._pending)

    async def _deliver(self, observers: tuple[Observer, ...], message: str) -> None:
        outcomes = await asyncio.gather(
            *(observer.update_observer(message) for observer in observers),
            return_exceptions=True,
        )
        for observer, outcome in zip(observers, outcomes):
            if isinstance(outcome, Exception):
                self._log.warning(
                    "observer.delivery_failed",
                    subject_id=self._subject_id,
                    observer_id=observer.get_observer_id(),
                    reason=str(outcome),
                )
