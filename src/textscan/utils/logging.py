"""JSON Lines event log for ``textscan`` command runs.

Command events carry a trace id plus arbitrary fields. Parser rejections
logged below the ``textscan`` logger add their ``reason``, ``target`` and
``base`` to the same line format.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping
from uuid import uuid4

__all__ = [
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]

LOGGER_NAME = "textscan"

_REJECTION_FIELDS = ("reason", "target", "base")


def _utc_timestamp(created: float) -> str:
    moment = datetime.fromtimestamp(created, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """Serialize a record, its trace id and its extra fields onto one line."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", None) or message,
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, Mapping):
            payload.update(extra_fields)

        for key in _REJECTION_FIELDS:
            if key not in payload and hasattr(record, key):
                payload[key] = getattr(record, key)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Route the ``textscan`` logger to ``log_path``, or silence it when ``None``.

    Handlers left by a previous call are closed first, so commands can be run
    repeatedly in one process.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()

    handler: logging.Handler
    if log_path is None:
        handler = logging.NullHandler()
    else:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Log ``event`` with ``fields``; a fresh trace id is minted when none is passed."""

    event_trace_id = trace_id or generate_trace_id()
    logger.log(
        level,
        message or event,
        extra={"trace_id": event_trace_id, "event": event, "extra_fields": fields},
    )
    return event_trace_id
