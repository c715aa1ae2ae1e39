"""MessageLogger Protocol — the logging capability consumed by the mock clients."""

from typing import Protocol

from g2mock.messagelog.domain.level import LogLevel


class MessageLogger(Protocol):
    """Logs numbered messages, filtered by the logger's current level.

    The message number selects the level (see ``level_for_code``); ``event``
    names the record and ``details`` carry the structured payload.
    """

    def log(self, code: int, event: str, **details: object) -> None: ...

    def set_log_level(self, level: LogLevel) -> None: ...

    def get_log_level(self) -> LogLevel: ...
