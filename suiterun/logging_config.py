"""
Structured logging configuration for suiterun.

Provides JSON-formatted logs with a run_id field (the run seed) so every line
of a run can be correlated and the run reproduced.

Environment Variables:
    SUITERUN_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    SUITERUN_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from suiterun.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, run_id="1234567")
    logger.info("Planned %d units", 12)
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logging() -> None:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - SUITERUN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - SUITERUN_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("SUITERUN_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("SUITERUN_LOG_FORMAT", "json").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stderr: stdout belongs to the command's own output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RunIdFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(run_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [run_id=%(run_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, run_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional run_id for correlation.

    Args:
        name: Logger name (typically __name__)
        run_id: Run identifier (typically the initial seed)

    Returns:
        LoggerAdapter with run_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"run_id": run_id or "N/A"})


class RunIdFilter(logging.Filter):
    """
    Logging filter that adds run_id to all log records.

    Ensures all records have a run_id field, even if not logged via get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = "N/A"  # type: ignore
        return True
