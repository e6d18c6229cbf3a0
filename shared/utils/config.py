"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Configuration
    APP_NAME: str = "Field Rules Validation Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None  # e.g. "logs/app.log"; console only when unset

    # Validation Configuration
    VALIDATION_LOCALE: str = "en"
    VALIDATION_LANGUAGE_DIR: Optional[str] = None  # defaults to bundled resources
    VALIDATION_RULES_PATH: str = "config/validation/rules.yaml"

    @property
    def language_dir(self) -> Path:
        """Directory holding <locale>/<domain>.yaml language files."""
        if self.VALIDATION_LANGUAGE_DIR:
            return Path(self.VALIDATION_LANGUAGE_DIR)
        return Path(__file__).resolve().parent.parent.parent / "modules" / "validation" / "resources"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
