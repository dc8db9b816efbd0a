"""
Logging Configuration
Custom JSON Logger implementation for function logs.

Provides:
- CustomJsonFormatter: one JSON object per log record
- setup_logging: YAML dictConfig loader driven by GatewayKitConfig
- ensure_logging: one-time setup used by the Lambda entry points
"""

import json
import logging
import logging.config
import os
import string
from datetime import datetime, timezone
from typing import Optional

import yaml

from ..config import get_config
from .request_context import get_request_id

# Set by ensure_logging() once the package configuration has been applied.
_logging_configured = False

_STANDARD_ATTRS = {
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


class CustomJsonFormatter(logging.Formatter):
    """
    JSON Formatter.

    Fields:
      - _time: ISO8601 timestamp (millisecond precision)
      - level: Log level
      - logger: Logger name (e.g. gatewaykit.handlers)
      - message: Log message
      - aws_request_id: requestContext.requestId of the current invocation
    """

    def format(self, record: logging.LogRecord) -> str:
        request_id = getattr(record, "aws_request_id", None) or get_request_id()

        log_data = {
            "_time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id:
            log_data["aws_request_id"] = request_id

        # Include extra fields
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_") and key not in log_data:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(config_path: Optional[str] = None):
    """
    Apply the YAML dictConfig at config_path (default: LOG_CONFIG_PATH).

    ${LOG_LEVEL} in the file resolves to GatewayKitConfig.LOG_LEVEL; other
    ${VAR} placeholders resolve from the environment. A missing file falls
    back to basicConfig at the configured level.
    """
    config = get_config()
    path = config_path or config.LOG_CONFIG_PATH
    level = config.LOG_LEVEL.upper()

    if not os.path.exists(path):
        logging.basicConfig(level=level)
        return

    with open(path, "r", encoding="utf-8") as f:
        content = string.Template(f.read()).safe_substitute({**os.environ, "LOG_LEVEL": level})
    logging.config.dictConfig(yaml.safe_load(content))


def ensure_logging() -> None:
    """Run setup_logging once per process; later calls are no-ops."""
    global _logging_configured
    if _logging_configured:
        return
    setup_logging()
    _logging_configured = True
