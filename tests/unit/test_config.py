"""Unit tests for settings validation and logging setup."""

import logging
from collections.abc import Generator

import pytest
from pydantic import ValidationError

from lang_portal.config import Settings, configure_logging


@pytest.fixture
def sqlalchemy_engine_logger() -> Generator[logging.Logger, None, None]:
    engine_logger = logging.getLogger("sqlalchemy.engine")
    level = engine_logger.level
    yield engine_logger
    engine_logger.setLevel(level)


class TestConfigureLogging:
    @pytest.mark.parametrize("environment", ["development", "test", "production"])
    def test_sql_statements_are_quiet_by_default(
        self, environment: str, sqlalchemy_engine_logger: logging.Logger
    ) -> None:
        configure_logging(environment)

        assert not sqlalchemy_engine_logger.isEnabledFor(logging.INFO)

    def test_sql_statements_can_be_enabled(self, sqlalchemy_engine_logger: logging.Logger) -> None:
        configure_logging("production", log_sql=True)

        assert sqlalchemy_engine_logger.isEnabledFor(logging.INFO)


class TestSettings:
    @pytest.mark.parametrize("page_size", [0, 101])
    def test_rejects_unusable_page_size_defaults(self, page_size: int) -> None:
        with pytest.raises(ValidationError):
            Settings(DEFAULT_PAGE_SIZE=page_size)

    def test_log_sql_defaults_to_off(self) -> None:
        assert Settings().LOG_SQL is False
