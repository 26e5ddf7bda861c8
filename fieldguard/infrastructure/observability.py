"""Structured Logging — JSON formatter and setup for validation events.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (fields, handler, error_code, path) surfaced when present
    - JSON format in production, human-readable in development
    - At most one handler installed by setup_logging on the fieldguard logger

Design Decisions:
    - JSONFormatter on top of stdlib logging: no extra dependency
    - Scoped to the "fieldguard" logger: the host app's root logger is left alone
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_KEYS = ("fields", "handler", "error_code", "path")
LOGGER_NAME = "fieldguard"

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach one handler to the fieldguard logger tree and return it.

    Calling again replaces the handler from the previous call.
    """
    global _installed_handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root = logging.getLogger(LOGGER_NAME)
    if _installed_handler is not None:
        root.removeHandler(_installed_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler
