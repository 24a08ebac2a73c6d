"""
Logging setup for authcore.

Records go to stdout and, when enabled, to a rotating application log plus
a rotating ``error.log`` next to it. Every record carries the id of the
request that produced it (``correlation_id``), taken from ``request_id_var``.
"""

import logging
import logging.config
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from authcore.infrastructure.config.settings import Settings

NO_REQUEST_ID = "no-request-id"

request_id_var: ContextVar[str] = ContextVar("request_id", default=NO_REQUEST_ID)

JSON_FORMATTER = "pythonjsonlogger.json.JsonFormatter"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s"
JSON_FIELDS = (
    "%(asctime)s %(name)s %(levelname)s %(filename)s "
    "%(lineno)d %(funcName)s %(correlation_id)s %(message)s"
)

# Library loggers that get their own level and do not propagate to root
LIBRARY_LEVELS = {
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the current request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = request_id_var.get()
        return True


def setup_logging(settings: Settings) -> None:
    """Install the logging configuration. Call once, before the app logs anything."""
    if settings.log_file_enabled:
        Path(settings.log_file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config(settings))

    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}, file_enabled={settings.log_file_enabled}"
    )


def _rotating_file(settings: Settings, filename: str, level: str, formatter: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": filename,
        "maxBytes": settings.log_file_max_bytes,
        "backupCount": settings.log_file_backup_count,
        "encoding": "utf-8",
        "filters": ["correlation_id"],
    }


def get_logging_config(settings: Settings) -> dict[str, Any]:
    """Build the ``dictConfig`` mapping for ``settings``."""
    formatter = "json" if settings.log_format == "json" else "text"

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": formatter,
            "stream": sys.stdout,
            "filters": ["correlation_id"],
        },
    }
    if settings.log_file_enabled:
        log_path = Path(settings.log_file_path)
        handlers["file"] = _rotating_file(
            settings, str(log_path), settings.log_level, formatter
        )
        handlers["error_file"] = _rotating_file(
            settings, str(log_path.parent / "error.log"), "ERROR", formatter
        )
    handler_names = list(handlers)

    loggers: dict[str, dict] = {
        name: {"level": level, "handlers": ["console"], "propagate": False}
        for name, level in LIBRARY_LEVELS.items()
    }
    loggers["sqlalchemy.engine"] = {
        "level": "INFO" if settings.db_echo else "WARNING",
        "handlers": ["console"],
        "propagate": False,
    }
    loggers["authcore"] = {
        "level": settings.log_level,
        "handlers": handler_names,
        "propagate": False,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": TEXT_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {"()": JSON_FORMATTER, "format": JSON_FIELDS},
        },
        "filters": {"correlation_id": {"()": CorrelationIdFilter}},
        "handlers": handlers,
        "root": {"level": settings.log_level, "handlers": handler_names},
        "loggers": loggers,
    }
