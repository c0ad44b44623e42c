"""
Dual-mode logging for the tfsage CLI.

Provides human-readable console logs by default and JSON structured logs
for log collectors when TFSAGE_LOG_FORMAT=json.
"""

import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

from tfsage.exceptions import ConfigError

DEFAULT_LOG_LEVEL = "WARNING"


def _resolve_level(level: str | int | None) -> int:
    # Explicit levels come from settings and must be valid, LOG_LEVEL falls back
    levels = logging.getLevelNamesMapping()
    if level is None:
        env_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        return levels.get(env_level, logging.WARNING)
    if isinstance(level, int) and not isinstance(level, bool) and level >= 0:
        return level
    if isinstance(level, str) and level.upper() in levels:
        return levels[level.upper()]
    raise ConfigError(f"Invalid logging level: {level!r}")


def setup_logger(name: str = "tfsage", level: str | int | None = None) -> logging.Logger:
    """
    Setup dual-mode logger for the CLI.

    Mode is determined by TFSAGE_LOG_FORMAT environment variable:
    - console: Human-readable logging with timestamps (default)
    - json: JSON structured logging

    Parameters
    ----------
    name : str, optional
        Logger name, by default "tfsage". Module loggers below this name
        propagate to it.
    level : str or int, optional
        Logging level name or number. Falls back to LOG_LEVEL environment
        variable, then to WARNING.

    Returns
    -------
    logging.Logger
        Configured logger instance

    Raises
    ------
    ConfigError
        If ``level`` is not a known level name or a non-negative number.

    Examples
    --------
    >>> logger = setup_logger(level="DEBUG")
    >>> logger.debug("Resolved 3 configurations")

    Environment Variables
    ---------------------
    TFSAGE_LOG_FORMAT : str
        Output format: "console" or "json"
    LOG_LEVEL : str
        Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    logger = logging.getLogger(name)

    logger.setLevel(_resolve_level(level))

    # Remove existing handlers to avoid duplicates if called multiple times
    logger.handlers.clear()

    log_format = os.getenv("TFSAGE_LOG_FORMAT", "console").lower()

    # stderr keeps log lines apart from Terraform's own stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logger.level)

    if log_format == "json":
        formatter = _create_json_formatter()
    else:
        formatter = _create_console_formatter()

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Don't propagate to root logger (prevents duplicate logs)
    logger.propagate = False

    return logger


def _create_json_formatter() -> logging.Formatter:
    """Create JSON formatter with Cloud Logging style severity field."""

    class SeverityFormatter(JsonFormatter):
        def add_fields(self, log_record, record, message_dict):
            super().add_fields(log_record, record, message_dict)

            if "levelname" in log_record:
                log_record["severity"] = log_record.pop("levelname")

    return SeverityFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def _create_console_formatter() -> logging.Formatter:
    """Create human-readable formatter for terminal use."""
    return logging.Formatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
