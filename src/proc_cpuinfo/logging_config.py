"""Logging configuration for proc-cpuinfo.

The library itself only emits records through the ``proc-cpuinfo`` logger.
Applications that want the structured text and JSON output call
:func:`setup_logging` once at start-up.
"""

import json
import logging
import logging.handlers

from pathlib import Path

from proc_cpuinfo.config import CONFIG


LOGGER_NAME = "proc-cpuinfo"
TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else was passed via ``extra``
RECORD_FIELDS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


def get_log_directory() -> Path | None:
    """Get the configured log directory, creating it if necessary."""
    if CONFIG.log_dir is None:
        return None

    CONFIG.log_dir.mkdir(parents=True, exist_ok=True)
    return CONFIG.log_dir


def get_log_level() -> int:
    """Get the log level from configuration (defaults to INFO)."""
    level = logging.getLevelName(CONFIG.log_level)
    return level if isinstance(level, int) else logging.INFO


def extra_fields(record: logging.LogRecord) -> dict:
    return {key: value for key, value in vars(record).items() if key not in RECORD_FIELDS}


class StructuredFormatter(logging.Formatter):
    """
    Structured log formatter supporting extra fields.

    Format: TIMESTAMP | LEVEL | NAME | MESSAGE | key=value ...
    """

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        fields = [f"{key}={value}" for key, value in extra_fields(record).items()]

        return f"{base_msg} | {' | '.join(fields)}" if fields else base_msg


class JSONFormatter(logging.Formatter):
    """JSON log formatter for machine-readable logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in extra_fields(record).items():
            log_data.setdefault(key, value)

        return json.dumps(log_data, default=str)


def _rotating_handler(path: Path, formatter: logging.Formatter, level: int) -> logging.Handler:
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        interval=1,
        backupCount=CONFIG.log_retention_days,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.suffix = "%Y-%m-%d"
    return handler


def setup_logging():
    """Set up the root logger with a console handler and, if a log directory
    is configured, rotating text and JSON log files."""
    log_dir = get_log_directory()
    log_level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(StructuredFormatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT))
    root_logger.addHandler(console_handler)

    if log_dir is not None:
        root_logger.addHandler(
            _rotating_handler(log_dir / "cpuinfo.log", StructuredFormatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT), log_level)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir / "cpuinfo.json", JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S"), log_level)
        )

    logging.getLogger(LOGGER_NAME).debug("Logging initialized", extra={"log_dir": log_dir})
