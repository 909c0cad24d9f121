"""
Application Settings for UniCompare

Centralized configuration using Pydantic Settings with .env support.
All environment variables are validated at startup.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Catalog shipped with the package
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "universities.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Cache lifetimes mirror the public CDN policy of the API:
    - list responses are short-lived (filters change often)
    - detail/compare/statistics responses live longer
    """

    # Application Settings
    app_name: str = "UniCompare"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # CORS Configuration
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Catalog Configuration (None = packaged data file)
    catalog_path: Optional[Path] = None

    # HTTP Cache Configuration
    cache_headers_enabled: bool = True
    list_cache_max_age: int = 60
    list_stale_while_revalidate: int = 120
    detail_cache_max_age: int = 300
    detail_stale_while_revalidate: int = 600

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_cache_windows(self) -> "Settings":
        """Cache lifetimes must be non-negative."""
        for name in (
            "list_cache_max_age",
            "list_stale_while_revalidate",
            "detail_cache_max_age",
            "detail_stale_while_revalidate",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} must be >= 0")
        return self

    @property
    def resolved_catalog_path(self) -> Path:
        """Path of the catalog file actually loaded at startup."""
        return self.catalog_path or DEFAULT_CATALOG_PATH

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export for direct import
settings = get_settings()
