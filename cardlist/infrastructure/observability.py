"""Structured Logging: JSON file sink plus console output outside production.

Invariants:
    - All JSON logs include timestamp, level, logger name, and message
    - Extra fields (path, method, status_code, card_id, list_id) surfaced when present
    - The file sink is always installed; the console sink only outside production
    - setup_logging is idempotent: handlers it installed earlier are replaced, not duplicated

Design Decisions:
    - stdlib logging + JSONFormatter: no logging dependency beyond the standard library
    - setup_logging called once on startup via lifespan
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "path", "method", "status_code", "card_id", "list_id", "error_type",
)

# Marks handlers owned by setup_logging so a second call can remove them.
_OWNED = "_cardlist_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines for the persistent log file."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = "info.log",
    console: bool = True,
) -> list[logging.Handler]:
    """Configure root logging. Returns the handlers installed."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _OWNED, False):
            root.removeHandler(existing)
            existing.close()

    handlers: list[logging.Handler] = []
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)
    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(
            "%(levelname)s: %(message)s",
        ))
        handlers.append(stream_handler)

    for handler in handlers:
        setattr(handler, _OWNED, True)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handlers
