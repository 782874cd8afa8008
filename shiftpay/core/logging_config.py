# shiftpay/core/logging_config.py
"""
Logging configuration for shiftpay.

JSON logs to rotating files in production, colored console output in
development. Library modules only call logging.getLogger(__name__); this
module is the single place where handlers are attached.
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from pathlib import Path


def is_production() -> bool:
    return os.getenv("PRODUCTION", "false").lower() == "true"


def log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


# Record attributes copied into JSON output when present
_RECORD_FIELDS = (
    "request_id",
    "method",
    "path",
    "status_code",
    "employee_id",
)


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line for log aggregation tools
    (Loki, CloudWatch, Elasticsearch).
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        for field in _RECORD_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if hasattr(record, "duration"):
            log_data["duration_ms"] = record.duration

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output in development.
    """

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def _rotating_file_handler(path: Path, level: int, formatter: logging.Formatter, max_bytes: int, backups: int):
    handler = logging.handlers.RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(production: bool | None = None, directory: Path | None = None) -> None:
    """
    Configure logging for the application.

    In production:
    - JSON format
    - app.log (INFO+) and error.log (ERROR+), rotating
    - WARNING+ to stdout

    In development:
    - Colored console output, DEBUG level
    - Plain-text app.log, rotating

    Args:
        production: Override the PRODUCTION env flag
        directory: Override the LOG_DIR env value
    """
    production = is_production() if production is None else production
    directory = directory or log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if production else logging.DEBUG)
    root_logger.handlers.clear()

    if production:
        json_formatter = JSONFormatter()
        root_logger.addHandler(
            _rotating_file_handler(directory / "app.log", logging.INFO, json_formatter, 10_000_000, 5)
        )
        root_logger.addHandler(
            _rotating_file_handler(directory / "error.log", logging.ERROR, json_formatter, 10_000_000, 10)
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(json_formatter)
        root_logger.addHandler(console_handler)
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            ColoredFormatter(fmt="%(levelname)-8s %(asctime)s [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        root_logger.addHandler(console_handler)

        root_logger.addHandler(
            _rotating_file_handler(
                directory / "app.log",
                logging.DEBUG,
                logging.Formatter("%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"),
                5_000_000,
                2,
            )
        )

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(logging.INFO)

    # Suppress noisy loggers
    logging.getLogger("watchfiles").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (production=%s)",
        production,
        extra={"extra_fields": {"log_dir": str(directory.absolute()), "production": production}},
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


class LogContext:
    """
    Context manager for adding extra fields to log records.

    Usage:
        with LogContext(employee_id="e-1", period="2025-01"):
            logger.info("Statement built")
    """

    def __init__(self, **kwargs):
        self.extra_fields = kwargs
        self.old_factory = None

    def __enter__(self):
        self.old_factory = logging.getLogRecordFactory()
        old_factory = self.old_factory
        fields = self.extra_fields

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            for key, value in fields.items():
                setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        logging.setLogRecordFactory(self.old_factory)
