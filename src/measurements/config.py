"""Configuration management for measurements."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import MeasurementSystem

logger = logging.getLogger(__name__)


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


# Find env file once at module load
_env_file = find_env_file()


class Settings(BaseSettings):
    """
    Display settings loaded from environment variables.

    The measurement system is owned by the host application; this package
    only reads it. Locally it can be set with MEASUREMENTS_MEASUREMENT_SYSTEM
    or in a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEASUREMENTS_",
        env_file=_env_file,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    measurement_system: MeasurementSystem = Field(
        default=MeasurementSystem.METRIC,
        description="Measurement system used for display: metric or imperial",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is not None:
        return _settings

    _settings = Settings()
    logger.debug(f"Loaded settings: measurement_system={_settings.measurement_system.value}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next read reloads them."""
    global _settings
    _settings = None


def current_measurement_system() -> MeasurementSystem:
    """Measurement system currently selected by the user."""
    return get_settings().measurement_system
