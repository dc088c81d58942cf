"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from pageframe.utils.logger import configure_logging


@pytest.mark.unit
class TestConfigureLogging:

    def test_rich_handler(self):
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)

    def test_plain_handler(self):
        configure_logging("warning", rich=False)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert not isinstance(root.handlers[0], RichHandler)

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "pageframe.log"
        configure_logging("INFO", rich=False, log_file=str(log_file))
        logging.getLogger("pageframe.test").info("hello file")

        for handler in logging.getLogger().handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_pypdf_is_quieted(self):
        configure_logging("DEBUG")

        assert logging.getLogger("pypdf").level == logging.ERROR

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
