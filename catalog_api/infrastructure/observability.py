"""Structured Logging — JSON records for the catalog service.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Catalog extras (product_id, user_id, error_code, path, email, backend)
      appear only when set on the record
    - The root logger holds at most one catalog handler, however often
      setup_logging runs (each app lifespan calls it)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("product_id", "user_id", "error_code", "path", "email", "backend")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_MARKER = "_catalog_handler"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, record.__dict__[key])
            for key in EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _catalog_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)]


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the catalog handler on the root logger, replacing an earlier one."""
    root = logging.getLogger()
    for old in _catalog_handlers(root):
        root.removeHandler(old)
        old.close()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
