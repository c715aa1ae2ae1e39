"""LogLevel — SDK log levels and the message-number ranges that map onto them."""

from enum import StrEnum

from g2mock.core.errors import LogLevelError


class LogLevel(StrEnum):
    """Log levels understood by the SDK, lowest severity first."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    PANIC = "PANIC"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def enables(self, level: "LogLevel") -> bool:
        """Return True if a message at ``level`` passes a logger set to this level."""
        return level.severity >= self.severity


_SEVERITY: dict[LogLevel, int] = {level: idx for idx, level in enumerate(LogLevel)}

# Each block of 1000 message numbers belongs to one level:
# 0-999 TRACE, 1000-1999 DEBUG, ..., 6000 and above PANIC.
_RANGE_SIZE = 1000


def level_for_code(code: int) -> LogLevel:
    """Return the level a message number is logged at."""
    levels = list(LogLevel)
    idx = min(max(code, 0) // _RANGE_SIZE, len(levels) - 1)
    return levels[idx]


def coerce_level(value: LogLevel | str) -> LogLevel:
    """Return value as a LogLevel; level names are matched case-insensitively.

    Raises:
        LogLevelError: if value does not name a level.
    """
    if isinstance(value, LogLevel):
        return value
    try:
        return LogLevel(str(value).strip().upper())
    except ValueError:
        raise LogLevelError(log_level=value) from None
