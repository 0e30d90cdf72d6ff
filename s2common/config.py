"""Process configuration — env-driven.

Reads from a .env file and S2COMMON_* environment variables using
pydantic-settings.  Nothing in the codecs depends on configuration for its
wire format; the settings only select defaults and diagnostics.
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class S2CommonConfig(BaseSettings):
    """Configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export S2COMMON_LOG_LEVEL=DEBUG
        export S2COMMON_DEFAULT_HASH_TYPE=2
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="S2COMMON_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "INFO"

    # Hash type used by HashFactory() when no type id is given.
    # Changing this changes every composite hash produced without an
    # explicit type, so it must match across all producers.
    default_hash_type: int = 1

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton — import as `from s2common.config import config`
config = S2CommonConfig()
