"""
Runtime settings for the hero project kernel.

Values come from HERO_* environment variables or a .env file.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "get_settings", "configure_logging"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HERO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Hero Project Kernel"

    # development or production
    environment: str = "production"

    log_level: str = "INFO"

    # When unset, validation assertions follow the environment
    enforce_validation: Optional[bool] = None

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def validation_enforced(self) -> bool:
        if self.enforce_validation is not None:
            return self.enforce_validation
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """Create and cache a single Settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
