"""Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - engine_config() is the only bridge from settings to the core EngineConfig

Design Decisions:
    - FIELDGUARD_ env prefix: settings live next to the host app's own variables
    - exclude given as a JSON list in the environment (FIELDGUARD_EXCLUDE='["csrftoken"]')
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fieldguard.core.engine_config import EngineConfig


class Settings(BaseSettings):
    """Validation settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FIELDGUARD_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Engine policy
    explicit: bool = False
    autofields: bool = True
    exclude: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("exclude", mode="before")
    @classmethod
    def drop_blank_names(cls, v):
        """Tolerate empty entries from hand-written env lists."""
        if isinstance(v, (list, tuple)):
            return [name for name in v if isinstance(name, str) and name.strip()]
        return v

    def engine_config(self) -> EngineConfig:
        return EngineConfig.build(
            explicit=self.explicit,
            autofields=self.autofields,
            exclude=self.exclude,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
