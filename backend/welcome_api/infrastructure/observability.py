"""Logging Setup — JSON or text formatter on the root logger.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (path, method, port) surfaced when present
    - setup_logging installs at most one handler, however often it is called

Design Decisions:
    - stdlib logging with a small JSONFormatter, no third-party logging lib
    - Text format by default; json is opt-in via LOG_FORMAT
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("path", "method", "port", "error_type")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _WelcomeApiHandler(logging.StreamHandler):
    """Marker subclass so repeated setup_logging calls can find their handler."""


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure the root logger for the application."""
    root = logging.getLogger()
    handler = next(
        (h for h in root.handlers if isinstance(h, _WelcomeApiHandler)), None,
    )
    if handler is None:
        handler = _WelcomeApiHandler()
        root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
