"""
Logging setup for Sprintdesk.

JSON output in production, human-readable text in development. Secrets such
as invitation tokens are masked with redact() before they reach a log record.
"""

import json
import logging
from datetime import datetime, timezone

REDACTED = "[REDACTED]"

_EXTRA_FIELDS = ("user_category", "outcome", "status_code")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

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


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """
    Configure the root logger.

    Safe to call more than once: a handler installed by a previous call is
    replaced rather than duplicated.

    Args:
        level: Log level name (DEBUG, INFO, ...)
        fmt: "json" or "text"
    """
    handler = logging.StreamHandler()
    handler.set_name("sprintdesk")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "sprintdesk":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def redact(message: str, *secrets: str) -> str:
    """
    Mask every occurrence of each secret in a message.

    Example:
        ```python
        redact("lookup failed for abc123", "abc123")
        # 'lookup failed for [REDACTED]'
        ```
    """
    for secret in secrets:
        if secret:
            message = message.replace(secret, REDACTED)
    return message
