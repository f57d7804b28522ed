"""Structured Logging — one-line JSON or text output for request and error logs.

Invariants:
    - Every JSON line carries timestamp, level, logger and message
    - timestamp is when the record was created (UTC), not when it was formatted
    - Request fields (method, path, status_code) and error fields
      (error_code, error_category, severity) appear only when the caller set them
    - setup_logging is idempotent: repeated calls replace, never stack, its handler

Design Decisions:
    - Built on logging.Formatter: handlers, levels and caplog keep working unchanged
    - Text is the default for a terminal; TOOLKIT_LOG_FORMAT=json for log shippers
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "toolkit_server"

EXTRA_FIELDS = (
    "method", "path", "status_code",
    "error_code", "error_category", "severity",
)


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            field: getattr(record, field)
            for field in EXTRA_FIELDS
            if getattr(record, field, None) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
