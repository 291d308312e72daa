"""Configuration constants and settings for qit."""

import os
from dataclasses import dataclass

__version__ = "0.3.0"

DISABLE_EMOJIS_ENV = "QIT_DISABLE_EMOJIS"
LOG_LEVEL_ENV = "QIT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Per-invocation settings, resolved once at the CLI boundary."""

    disable_emojis: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ=None):
        """
        Build settings from environment variables.

        Emojis are disabled only when QIT_DISABLE_EMOJIS is exactly "true".
        """
        env = os.environ if environ is None else environ
        return cls(
            disable_emojis=env.get(DISABLE_EMOJIS_ENV) == "true",
            log_level=(env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper(),
        )
