"""Structlog implementation of the Observer port."""

import json

import structlog


class StructlogObserver:
    """Logs every notification it receives through structlog.

    Satisfies the Observer protocol structurally.
    """

    def __init__(self, observer_id: str = "structlog") -> None:
        self._observer_id = observer_id
        self._log = structlog.get_logger()

    def get_observer_id(self) -> str:
        return self._observer_id

    async def update_observer(self, message: str) -> None:
        try:
            fields = json.loads(message)
        except json.JSONDecodeError:
            self._log.warning(
                "observer.malformed_notification",
                observer_id=self._observer_id,
                message=message,
            )
            return
        self._log.info(
            "observer.notified",
            observer_id=self._observer_id,
            subject_id=fields.get("subjectId"),
            message_id=fields.get("messageId"),
            details=fields,
        )
