"""Configuration management for the book tracker.

Settings are read from environment variables prefixed with
``BOOK_TRACKER_`` (or a local ``.env`` file) and cached for the process.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Runtime settings.

    Attributes:
        log_level: Minimum structlog level written to stderr
        log_format: ``console`` or ``json``
        error_log_name: File name of the error log kept beside the catalog
        catalog_suffix: Required extension of the catalog path
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOK_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "console"
    error_log_name: str = "errors.log"
    catalog_suffix: str = ".txt"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {VALID_LOG_FORMATS}")
        return lower


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
