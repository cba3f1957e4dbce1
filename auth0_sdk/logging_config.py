"""Log output for the ``auth0_sdk`` logger.

Connections attach the call context to their records through ``extra``
(see :data:`CALL_FIELDS`).  :class:`JSONFormatter` emits those as top-level
keys; :class:`TextFormatter` appends them as ``key=value`` pairs.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from auth0_sdk.config import settings
from auth0_sdk.core.request_context import get_request_id

SDK_LOGGER_NAME = "auth0_sdk"

# Per-call fields passed as ``extra`` by auth0_sdk.core.connection.
CALL_FIELDS: tuple[str, ...] = (
    "http_method",
    "path",
    "status_code",
    "elapsed_ms",
    "rate_limit_remaining",
)


def _call_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        name: getattr(record, name)
        for name in CALL_FIELDS
        if getattr(record, name, None) is not None
    }


def _utc(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _utc(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id
        entry.update(_call_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``<time> <LEVEL> [<rid>] <logger> - <message> key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        parts = [_utc(record).strftime("%Y-%m-%d %H:%M:%S"), f"{record.levelname:<8}"]
        request_id = get_request_id()
        if request_id:
            parts.append(f"[{request_id[:12]}]")
        parts.append(f"{record.name} - {record.getMessage()}")
        parts.extend(f"{k}={v}" for k, v in _call_context(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str | None = None, log_format: str | None = None
) -> logging.Logger:
    """Attach a stderr handler to the ``auth0_sdk`` logger.

    Level and format default to ``AUTH0_LOG_LEVEL`` and ``AUTH0_LOG_FORMAT``.
    The root logger is left alone, and calling this again replaces the
    handler installed by the previous call.
    """
    level_name = (log_level or settings.log_level).upper()
    formatter: logging.Formatter = (
        JSONFormatter()
        if (log_format or settings.log_format).lower() == "json"
        else TextFormatter()
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(SDK_LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.handlers[:] = [handler]
    logger.propagate = False
    return logger
