"""Structured logging: JSON formatter used by the Django LOGGING config.

All records include timestamp, level, logger name and message. Known extra
fields (error_code, ticket_type, ...) are surfaced when present.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code",
    "ticket_type",
    "entrant_type",
    "purchase_count",
    "total_cents",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def build_logging_config(level: str = "INFO", fmt: str = "json") -> dict:
    """Return a ``dictConfig`` mapping for Django's LOGGING setting."""
    formatter = "json" if fmt == "json" else "text"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JSONFormatter},
            "text": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": formatter},
        },
        "loggers": {
            "admissions": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": True,
            },
        },
    }
