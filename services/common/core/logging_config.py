"""
Logging Configuration
Custom JSON Logger implementation for structured, line-oriented logs.

Provides:
- CustomJsonFormatter: one JSON object per record, request-aware
- setup_logging: YAML dictConfig loader with environment substitution
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone

import yaml


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. uvicorn.access, hostflags.handler)
      - message: Log message
      - request_id: Request ID (X-Request-ID) of the request being served
    """

    standard_attrs = {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }

    def format(self, record: logging.LogRecord) -> str:
        # Request ID resolution
        request_id = getattr(record, "request_id", None)
        if not request_id:
            from .request_context import get_request_id

            request_id = get_request_id()

        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id:
            log_data["request_id"] = request_id

        # Include extra fields
        for key, value in record.__dict__.items():
            if key not in self.standard_attrs and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: str = "logging.yml"):
    """
    Load the YAML config, substitute environment variables, and initialize logging.
    """
    if not os.path.exists(config_path):
        logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
        return

    with open(config_path, "r", encoding="utf-8") as f:
        # Substitute environment variables using string.Template.
        # Supports ${LOG_LEVEL} format.
        template = string.Template(f.read())

        # Default values.
        mapping = os.environ.copy()
        if "LOG_LEVEL" not in mapping:
            mapping["LOG_LEVEL"] = "INFO"

        content = template.safe_substitute(mapping)
        config = yaml.safe_load(content)
        logging.config.dictConfig(config)
