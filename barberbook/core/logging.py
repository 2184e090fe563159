"""Logging setup for the booking API.

Everything goes to stdout through the root logger. The store logs under
``barberbook.store``, requests under ``barberbook.request`` and error
responses under ``barberbook.exception``.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from typing import Any

# Record attributes copied into JSON output when present.
EXTRA_KEYS = (
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "error_type",
    "user_id",
    "role",
    "operation",
)


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, with the store and request extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key in EXTRA_KEYS:
            if key in record.__dict__:
                payload[key] = record.__dict__[key]
        return json.dumps(payload, ensure_ascii=False)


def configure_logging() -> None:
    """Configure stdlib logging from the environment.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: true/false (default: false)
    - LOG_REQUESTS: true/false (default: true); uvicorn's access log is
      quieted while our request middleware is on
    - SQL_LOG_LEVEL: level for the slot database engine (default: WARNING)
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_requests = env_bool("LOG_REQUESTS", default=True)
    formatter = "json" if env_bool("LOG_JSON", default=False) else "text"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                },
                "json": {"()": "barberbook.core.logging.JsonFormatter"},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": formatter,
                    "stream": sys.stdout,
                }
            },
            "root": {"handlers": ["console"], "level": level},
            "loggers": {
                "uvicorn.access": {
                    "level": "WARNING" if log_requests else "INFO",
                },
                "sqlalchemy.engine": {
                    "level": os.getenv("SQL_LOG_LEVEL", "WARNING"),
                },
            },
        }
    )
