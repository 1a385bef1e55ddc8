"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lang_portal.pagination import MAX_PAGE_SIZE

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DATA_DIR = PROJECT_ROOT / "data"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./data/learning.db"
    CREATE_TABLES_ON_STARTUP: bool = True
    LOG_SQL: bool = False

    # API (constants, not from env)
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Lang Portal API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    STUDY_SESSION_PAGE_SIZE: int = 100

    @field_validator("DEFAULT_PAGE_SIZE", "STUDY_SESSION_PAGE_SIZE", mode="after")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        """Page size defaults must be usable as-is by the pagination helper."""
        if value < 1 or value > MAX_PAGE_SIZE:
            msg = f"Page size must be between 1 and {MAX_PAGE_SIZE}"
            raise ValueError(msg)
        return value


_LOG_LEVELS = {
    "development": logging.DEBUG,
    "test": logging.WARNING,
    "production": logging.INFO,
}


def configure_logging(environment: str = "development", log_sql: bool = False) -> None:
    """
    Route stdlib and structlog output through one stdout handler.

    Production renders JSON lines, other environments the console renderer.
    SQL statements from the engine are only logged when log_sql is set;
    otherwise the debug root level of development would echo every query.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=_LOG_LEVELS.get(environment, logging.INFO),
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if log_sql else logging.WARNING)

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if environment == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
