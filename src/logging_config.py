"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: level, timestamp, logger, message. Call-specific fields are added
contextually (method, url, status, duration_ms for transport calls;
resource, error_reason for failed load cycles).

SECURITY: Never logs bearer tokens or other credential values.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone


# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|secret|password|token|credential|authorization)"
    r"[\s]*[=:]\s*(bearer\s+)?\S+",
    re.IGNORECASE,
)
_BEARER_PATTERN = re.compile(r"bearer\s+[A-Za-z0-9\-._~+/]+=*", re.IGNORECASE)

# Contextual fields copied from ``extra`` when present
_CONTEXT_FIELDS = ("method", "url", "status", "duration_ms", "resource", "generation")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: level, timestamp, logger, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": self._sanitize(record.getMessage()),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if hasattr(record, "error_reason"):
            entry["error_reason"] = self._sanitize(
                str(getattr(record, "error_reason"))
            )

        # Exception info
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self._sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)

    @staticmethod
    def _sanitize(text: str) -> str:
        """Remove sensitive values from log text."""
        text = _SENSITIVE_PATTERNS.sub("[REDACTED]", text)
        return _BEARER_PATTERN.sub("[REDACTED]", text)


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_format:
        Emit JSON entries when True, plain text otherwise.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    root.addHandler(handler)
