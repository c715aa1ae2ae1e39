"""Base exception class for all g2mock-specific errors."""


class G2MockError(Exception):
    """Base class for all g2mock errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable


class ObserverRegistrationError(G2MockError):
    """Raised when the observer registry rejects an observer."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to register observer: {reason}")


class SettingsError(G2MockError):
    """Raised when client settings cannot be built from the environment."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load settings: {reason}")


class LogFormatError(G2MockError):
    """Raised when an unknown structlog output format is requested."""

    def __init__(self, log_format: str) -> None:
        self.log_format = log_format
        super().__init__(
            f"Failed to configure logging: unknown log format '{log_format}'"
            " (expected 'console' or 'json')"
        )


class LogLevelError(G2MockError):
    """Raised when a log level name is not one of the known levels."""

    def __init__(self, log_level: object) -> None:
        self.log_level = log_level
        super().__init__(f"Failed to set log level: unknown level {log_level!r}")
