"""Tests for tfsage.lib.logger module."""

import json
import logging

import pytest

from tfsage.exceptions import ConfigError
from tfsage.lib.logger import setup_logger


@pytest.mark.unit
class TestSetupLogger:
    """Tests for setup_logger() function."""

    def test_console_mode(self, monkeypatch, capfd):
        """Test setup_logger creates console logger by default."""
        monkeypatch.delenv("TFSAGE_LOG_FORMAT", raising=False)

        test_logger = setup_logger("tfsage-test", level="INFO")
        test_logger.info("Test message")

        captured = capfd.readouterr()
        assert "tfsage-test" in captured.err
        assert "INFO" in captured.err
        assert "Test message" in captured.err
        assert captured.out == ""

    def test_json_mode(self, monkeypatch, capfd):
        """Test setup_logger creates JSON logger when requested."""
        monkeypatch.setenv("TFSAGE_LOG_FORMAT", "json")

        test_logger = setup_logger("tfsage-test", level="INFO")
        test_logger.info("Test message")

        log_data = json.loads(capfd.readouterr().err.strip())
        assert log_data["name"] == "tfsage-test"
        assert log_data["severity"] == "INFO"
        assert log_data["message"] == "Test message"

    def test_level_from_environment(self, monkeypatch, capfd):
        """Test LOG_LEVEL is used when no level is passed."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        test_logger = setup_logger("tfsage-test")
        test_logger.debug("Debug message")

        assert "Debug message" in capfd.readouterr().err

    def test_default_level_is_warning(self, monkeypatch, capfd):
        """Test setup_logger defaults to WARNING."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        test_logger = setup_logger("tfsage-test")
        test_logger.info("Info message")
        test_logger.warning("Warning message")

        captured = capfd.readouterr()
        assert "Info message" not in captured.err
        assert "Warning message" in captured.err

    def test_no_duplicate_handlers(self):
        """Test calling setup_logger twice keeps one handler."""
        setup_logger("tfsage-test")
        test_logger = setup_logger("tfsage-test")

        assert len(test_logger.handlers) == 1
        assert test_logger.propagate is False

    def test_module_loggers_propagate(self, capfd):
        """Test child module loggers reach the package handler."""
        setup_logger("tfsage-test", level="DEBUG")
        logging.getLogger("tfsage-test.lib.configs").debug("Resolved 2 configuration(s)")

        assert "Resolved 2 configuration(s)" in capfd.readouterr().err

    @pytest.mark.parametrize("level, expected", [(10, logging.DEBUG), ("error", logging.ERROR)])
    def test_numeric_and_lowercase_levels(self, level, expected):
        """Test settings may give the level as a number or in any case."""
        test_logger = setup_logger("tfsage-test", level=level)

        assert test_logger.level == expected

    @pytest.mark.parametrize("level", ["LOUD", True, -1, ["DEBUG"]])
    def test_invalid_level_raises(self, level):
        """Test an unknown level is reported as a settings error."""
        with pytest.raises(ConfigError, match="Invalid logging level"):
            setup_logger("tfsage-test", level=level)

    def test_invalid_environment_level_falls_back(self, monkeypatch):
        """Test an unknown LOG_LEVEL falls back to WARNING."""
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        assert setup_logger("tfsage-test").level == logging.WARNING
