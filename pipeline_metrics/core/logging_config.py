"""
Logging setup for the delivery metrics CLI.

Console logs go to stderr, human-readable by default or JSON with
json_output=True. An optional log file always receives JSON lines.
stdout is left to the metric records.

Usage:
    from pipeline_metrics.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Fetched executions", extra={"pipeline_name": "api-deploy", "execution_count": 42})
"""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# SDK loggers that are chatty at DEBUG/INFO
QUIET_LOGGERS = ("boto3", "botocore", "urllib3")

# Attributes every LogRecord carries; anything else arrived through extra={...}
_STANDARD_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    fields = dict(getattr(record, "extra_fields", {}))
    for key, value in vars(record).items():
        if key not in _STANDARD_RECORD_ATTRS and key != "extra_fields":
            fields.setdefault(key, value)
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for log shippers and the --log-file output."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record).items():
            entry.setdefault(key, value)

        return json.dumps(entry, default=str)


class ContextFormatter(logging.Formatter):
    """
    Console formatter that colors the level name when stderr is a terminal.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str = CONSOLE_FORMAT, datefmt: str = CONSOLE_DATE_FORMAT):
        super().__init__(fmt=fmt, datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        plain = record.levelname
        color = self.LEVEL_COLORS.get(record.levelno)
        if color and sys.stderr.isatty():
            record.levelname = f"{color}{plain}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def _console_handler(level: int, json_output: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_output else ContextFormatter())
    return handler


def _file_handler(level: int, log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging(level: str = "INFO", log_file: Path | None = None, json_output: bool = False) -> None:
    """
    Replace the root logger's handlers for one CLI run.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path that also receives JSON lines
        json_output: Emit console logs as JSON instead of colored text

    Example:
        setup_logging(level="DEBUG")
        setup_logging(log_file=Path(".tmp/logs/pipeline_metrics.log"), json_output=True)
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(numeric_level, json_output))
    if log_file:
        root_logger.addHandler(_file_handler(numeric_level, log_file))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **context: Any) -> None:
    """
    Log a message with keyword context attached as structured fields.

    Example:
        log_with_context(logger, "info", "Metrics computed", pipeline_name="api-deploy", execution_count=42)
    """
    getattr(logger, level.lower())(message, extra={"extra_fields": context})
