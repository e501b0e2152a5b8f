from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``LEDGER_*`` environment variables or ``.env``."""

    app_name: str = "Account Ledger API"
    database_url: str = "sqlite:///account_ledger.db"
    log_level: str = "INFO"
    # Write the six demo accounts when the app starts; overwrites same-id records.
    seed_on_startup: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
