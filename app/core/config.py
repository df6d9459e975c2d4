"""Runtime settings for the migration difficulty engine.

Values come from process environment variables, optionally seeded from a
``.env`` file in the working directory. Nothing is required: with an empty
environment the service runs in ``dev`` against the packaged catalog.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "ecosystems.toml"

# Environments not listed here log at INFO
ENV_LOG_LEVELS = {
    "dev": logging.DEBUG,
}


def _load_env_file() -> bool:
    """Export a readable ``.env`` into the process environment without overriding it."""
    try:
        return load_dotenv(override=False)
    except OSError:
        return False


_load_env_file()


class Settings(BaseSettings):
    """Engine settings; field names double as environment variable names."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    MIGRATION_ENGINE_ENV: str = Field(
        default="dev", description="Deployment environment: dev, test, staging, prod"
    )
    LOG_LEVEL: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = Field(
        default=None, description="Explicit log level; derived from the environment when unset"
    )
    ECOSYSTEM_CATALOG_PATH: Path = Field(
        default=DEFAULT_CATALOG_PATH,
        description="TOML file holding the ecosystem catalog",
    )

    @property
    def log_level(self) -> int:
        """Numeric level for engine loggers."""
        if self.LOG_LEVEL is not None:
            return getattr(logging, self.LOG_LEVEL)
        return ENV_LOG_LEVELS.get(self.MIGRATION_ENGINE_ENV, logging.INFO)


@lru_cache
def get_settings() -> Settings:
    """
    Build settings once per process.

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
