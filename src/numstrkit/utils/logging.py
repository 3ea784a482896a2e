"""Structured logging utilities emitting JSON Lines payloads."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, MutableMapping
from uuid import uuid4

__all__ = [
    "JsonLogFormatter",
    "PROJECT_LOGGER",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]

PROJECT_LOGGER = "numstrkit"


class JsonLogFormatter(logging.Formatter):
    """Format log records as single-line JSON payloads."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: MutableMapping[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        event = getattr(record, "event", None) or message
        payload["event"] = event

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, Mapping):
            payload.update(extra_fields)

        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Configure the project logger with a JSONL handler.

    Without ``log_path`` a :class:`logging.NullHandler` is installed so library
    use stays silent.
    """

    logger = logging.getLogger(PROJECT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    else:
        handler = logging.NullHandler()

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    """Flush the handlers of ``logger`` and of every ancestor it propagates to.

    Module loggers such as ``numstrkit.parsing.engine`` carry no handlers of
    their own; their records land on the ``numstrkit`` project logger.
    """

    current: logging.Logger | None = logger
    while current is not None:
        for handler in current.handlers:
            handler.flush()
        current = current.parent if current.propagate else None


def generate_trace_id(scope: str | None = None) -> str:
    """Return an identifier shared by the events of one CLI run or batch.

    ``scope`` prefixes the hex id, e.g. ``parse-3f2a...``.
    """

    token = uuid4().hex
    return f"{scope}-{token}" if scope else token


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Emit a structured event on the provided ``logger``."""

    event_trace_id = trace_id or generate_trace_id()
    extra = {
        "trace_id": event_trace_id,
        "event": event,
        "extra_fields": fields,
    }

    logger.log(level, message or event, extra=extra)
    return event_trace_id
