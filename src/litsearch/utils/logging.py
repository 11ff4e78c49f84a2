"""Logging for pipeline stages.

Stages log a one-line summary and attach its numbers as structured fields::

    logger.info("Created network", extra={"fields": {"nodes": 12, "edges": 30}})

The JSON formatter writes the fields as top-level keys; the text formatter
appends them as ``key=value`` pairs.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping

from ..config.settings import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def record_fields(record: logging.LogRecord) -> Mapping[str, Any]:
    fields = getattr(record, "fields", None)
    return fields if isinstance(fields, Mapping) else {}


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record_fields(record).items():
            log_data.setdefault(key, value)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class FieldsFormatter(logging.Formatter):
    """Plain-text format with structured fields appended."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = record_fields(record)
        if fields:
            line += " | " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


def build_handler(log_format: str = settings.log_format) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(FieldsFormatter(TEXT_FORMAT))
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return a logger with one stdout handler configured from settings."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(build_handler(settings.log_format))
        logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger
