"""StructlogMessageLogger — MessageLogger implementation backed by structlog."""

import sys

import structlog

from g2mock.messagelog.domain.level import LogLevel, coerce_level, level_for_code

_METHOD_BY_LEVEL: dict[LogLevel, str] = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "critical",
    LogLevel.PANIC: "critical",
}


def format_message_id(component_id: int, code: int) -> str:
    """Return the public message id, e.g. ``senzing-60240001``."""
    return f"senzing-{component_id:04d}{code:04d}"


class StructlogMessageLogger:
    """Emits numbered messages through structlog.

    Satisfies the MessageLogger protocol structurally. Each instance keeps
    its own level, so two clients never affect each other's filtering.
    TRACE has no structlog method of its own; TRACE records go out through
    ``debug`` and carry ``severity="TRACE"``.
    """

    def __init__(self, component_id: int, level: LogLevel = LogLevel.INFO) -> None:
        self._component_id = component_id
        self._level = coerce_level(level)
        self._log = structlog.get_logger()

    def log(self, code: int, event: str, **details: object) -> None:
        level = level_for_code(code)
        if not self._level.enables(level):
            return
        emit = getattr(self._log, _METHOD_BY_LEVEL[level])
        try:
            emit(
                event,
                message_id=format_message_id(self._component_id, code),
                severity=level.value,
                **details,
            )
        except (OSError, ValueError) as exc:
            # Logging is best-effort; the output stream may already be closed.
            sys.stderr.write(f"Error: failed to log {event}: {exc}\n")

    def set_log_level(self, level: LogLevel | str) -> None:
        self._level = coerce_level(level)

    def get_log_level(self) -> LogLevel:
        return self._level
