"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./car_rental.db"
    database_echo: bool = False
    create_tables: bool = True
    seed_catalog: bool = True

    # Application
    debug: bool = False
    service_name: str = "car-rental"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    log_enable_console: bool = True
    log_enable_file: bool = False

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Accept log levels in any case."""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
