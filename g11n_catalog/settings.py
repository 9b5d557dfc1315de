"""
Catalog Configuration
Uses Pydantic Settings with .env loading.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        alias="LOG_FORMAT",
    )


class CatalogSettings(BaseSettings):
    """Main catalog settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    catalog_path: Optional[Path] = Field(default=None, alias="G11N_CATALOG_PATH")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("catalog_path", mode="before")
    @classmethod
    def validate_catalog_path(cls, v: Any) -> Any:
        """Treat an empty G11N_CATALOG_PATH as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache()
def get_settings() -> CatalogSettings:
    """Get cached settings instance."""
    return CatalogSettings()


def reload_settings() -> CatalogSettings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[CatalogSettings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.logging.log_level.upper(),
        format=settings.logging.log_format,
    )
