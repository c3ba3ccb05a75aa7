"""Configuration management for librunner."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .units import UnitSystem

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


class Settings(BaseSettings):
    """
    Library and CLI settings loaded from environment variables.

    Variables are prefixed with LIBRUNNER_, e.g. LIBRUNNER_DEFAULT_UNIT_SYSTEM=imperial.
    A .env file at the project root is read as well.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIBRUNNER_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_unit_system: UnitSystem = Field(
        default=UnitSystem.METRIC,
        description="Unit system used when none is given explicitly",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    negative_split_degree: int = Field(
        default=5,
        description="Default seconds of variation for negative and positive splits",
        ge=0,
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get settings (singleton pattern).

    Returns:
        Settings instance loaded from the environment on first call
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once, defaulting to the configured log level."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
