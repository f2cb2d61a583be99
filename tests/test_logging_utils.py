"""
Tests for logging configuration.
"""

import logging

import pytest
from rich.logging import RichHandler

from projterm import logging_utils
from projterm.logging_utils import ROOT_LOGGER_NAME, configure_logging


@pytest.fixture
def fresh_logger(monkeypatch):
    """Reset the projterm logger and the configured-level cache."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)
    logger.handlers = [h for h in logger.handlers if not isinstance(h, RichHandler)]
    yield logger
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def rich_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_attaches_rich_handler(self, fresh_logger):
        """A Rich handler is attached and the level applied."""
        configure_logging("debug")

        assert len(rich_handlers(fresh_logger)) == 1
        assert fresh_logger.level == logging.DEBUG

    def test_repeat_calls_do_not_duplicate(self, fresh_logger):
        """Reconfiguring replaces the handler."""
        configure_logging("INFO")
        configure_logging("INFO")
        configure_logging("WARNING")

        assert len(rich_handlers(fresh_logger)) == 1
        assert fresh_logger.level == logging.WARNING

    def test_numeric_level(self, fresh_logger):
        """Numeric levels are accepted as-is."""
        configure_logging(logging.ERROR)

        assert fresh_logger.level == logging.ERROR

    def test_unknown_level(self, fresh_logger):
        """Unknown level names raise."""
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")
