"""
Module: logger.py
Description: Logging helpers for AWS Publisher.

Importing this package never touches the global structlog setup; the
host application owns it. Applications that have no structlog setup of
their own can call configure_logging() once at startup to get JSON
lines suitable for CloudWatch Logs:

    >>> from aws_publisher import configure_logging, load_settings
    >>> configure_logging(load_settings().log_level)
"""

import logging
from datetime import datetime, timezone

import structlog

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _add_timestamp(logger, method_name, event_dict):
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = "INFO") -> None:
    """
    Route structlog output through a JSON renderer filtered at `level`.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (any case)

    Raises:
        ValueError: If level is not a known logging level
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"level must be one of: {', '.join(LOG_LEVELS)}")

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Return a lazily bound structlog logger; it follows whatever config is active when first used."""
    return structlog.get_logger(name)
