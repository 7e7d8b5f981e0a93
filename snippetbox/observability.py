"""Structured logging: JSON formatter and setup.

Request-scoped keys (proto, method, uri, ip, status) are passed through
`extra=` and surfaced by both formatters when present.
"""

import json
import logging
from datetime import UTC, datetime

REQUEST_KEYS = ("proto", "method", "uri", "ip", "status")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in REQUEST_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Human-readable lines with request keys appended as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = [
            f"{key}={record.__dict__[key]}"
            for key in REQUEST_KEYS
            if record.__dict__.get(key) is not None
        ]
        if pairs:
            line = f"{line} {' '.join(pairs)}"
        return line


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure logging for the application. Safe to call more than once."""
    if any(getattr(h, "_snippetbox", False) for h in logging.root.handlers):
        return
    handler = logging.StreamHandler()
    handler._snippetbox = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(KeyValueFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
