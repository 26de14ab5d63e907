"""
Structured logging configuration for livereducer.

Reducers log at DEBUG through get_logger(), tagged with their reducer_id.
Nothing is configured on import; setup_logging() is for applications that
want JSON (or text) output on stdout.

Environment Variables:
    LIVEREDUCER_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    LIVEREDUCER_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from livereducer.logging_config import setup_logging

    setup_logging()
    reducer = create_reducer(handlers, 0, name="todos")
    # DEBUG records from the reducer now carry reducer_id="todos"
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - LIVEREDUCER_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    - LIVEREDUCER_LOG_FORMAT: json, text (default: json)

    Unknown levels fall back to INFO, unknown formats to text.
    """
    log_level = os.getenv("LIVEREDUCER_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("LIVEREDUCER_LOG_FORMAT", "json").lower()
    level = LEVEL_MAP.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ReducerIDFilter())

    if log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(reducer_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [reducer_id=%(reducer_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, reducer_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional reducer_id for correlation.

    Args:
        name: Logger name (typically __name__)
        reducer_id: Identifies the reducer emitting the records

    Returns:
        LoggerAdapter with reducer_id in extra fields

    Example:
        logger = get_logger(__name__, reducer_id="todos")
        logger.debug("Registered handler")
        # Output (JSON): {"timestamp": "...", "level": "DEBUG", "message": "Registered handler", "reducer_id": "todos"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"reducer_id": reducer_id or "N/A"})


class ReducerIDFilter(logging.Filter):
    """
    Logging filter that adds reducer_id to all log records.

    Records emitted without a LoggerAdapter still format cleanly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "reducer_id"):
            record.reducer_id = "N/A"  # type: ignore
        return True


def add_reducer_id_filter() -> None:
    """Add ReducerIDFilter to every handler on the root logger."""
    for handler in logging.getLogger().handlers:
        handler.addFilter(ReducerIDFilter())
