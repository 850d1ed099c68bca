"""Tests for schema_messages.lib.logging_config."""

import logging
from collections.abc import Generator

import pytest

from schema_messages.lib.logging_config import PACKAGE_LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def package_logger() -> Generator[logging.Logger]:
    """Package logger, restored to its original state after the test."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger()."""

    def test_module_names_kept(self) -> None:
        """Package module names are used unchanged."""
        assert get_logger("schema_messages.facade").name == "schema_messages.facade"

    def test_foreign_names_nested_under_package(self) -> None:
        """Other names are placed under the package logger."""
        assert get_logger("host").name == "schema_messages.host"


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.mark.parametrize(
        ("verbose", "quiet", "level"),
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.WARNING),
            (True, True, logging.WARNING),
        ],
    )
    def test_levels(
        self, package_logger: logging.Logger, verbose: bool, quiet: bool, level: int
    ) -> None:
        """verbose and quiet pick the level; quiet wins."""
        setup_logging(verbose=verbose, quiet=quiet)
        assert package_logger.level == level

    def test_handler_added_once(self, package_logger: logging.Logger) -> None:
        """Repeated setup reuses the same stream handler."""
        before = len(package_logger.handlers)
        setup_logging()
        setup_logging(verbose=True)
        assert len(package_logger.handlers) == before + 1
