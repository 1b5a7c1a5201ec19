"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from validation_report.log import LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_does_not_propagate_to_root(self):
        """Records should not also reach handlers the host put on the root logger."""
        configure_logging(0)
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_single_handler_across_calls(self):
        configure_logging(0)
        configure_logging(2)

        logger = logging.getLogger(LOGGER_NAME)
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert logger.level == logging.DEBUG
        assert handlers[0].level == logging.DEBUG

    def test_verbosity_levels(self):
        configure_logging(1)
        assert logging.getLogger(LOGGER_NAME).level == logging.INFO
        configure_logging(0)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING
