"""ClientSettings — construction-time settings shared by every mock client."""

import os
from collections.abc import Mapping

from pydantic import BaseModel

from g2mock.core.errors import SettingsError
from g2mock.messagelog.domain.level import LogLevel

LOG_LEVEL_ENV_VAR = "G2MOCK_LOG_LEVEL"


class ClientSettings(BaseModel, frozen=True):
    """Initial logger level of a client; TRACE turns call tracing on."""

    log_level: LogLevel = LogLevel.INFO

    @property
    def is_trace(self) -> bool:
        return self.log_level == LogLevel.TRACE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientSettings":
        """Build settings from G2MOCK_LOG_LEVEL, defaulting to INFO when unset.

        Raises:
            SettingsError: if the variable holds an unknown level name.
        """
        env = os.environ if environ is None else environ
        raw = env.get(LOG_LEVEL_ENV_VAR, "").strip()
        if not raw:
            return cls()
        try:
            return cls(log_level=LogLevel(raw.upper()))
        except ValueError:
            valid = ", ".join(level.value for level in LogLevel)
            raise SettingsError(
                reason=f"{LOG_LEVEL_ENV_VAR}={raw!r} is not one of {valid}"
            ) from None
