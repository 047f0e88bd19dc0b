# === NAVMAP v1 ===
# {
#   "module": "ChunkSort.logging",
#   "purpose": "Structured logging helpers for the sort pipeline and CLI.",
#   "sections": [
#     {
#       "id": "jsonformatter",
#       "name": "JSONFormatter",
#       "anchor": "class-jsonformatter",
#       "kind": "class"
#     },
#     {
#       "id": "structuredlogger",
#       "name": "StructuredLogger",
#       "anchor": "class-structuredlogger",
#       "kind": "class"
#     },
#     {
#       "id": "get-logger",
#       "name": "get_logger",
#       "anchor": "function-get-logger",
#       "kind": "function"
#     },
#     {
#       "id": "log-event",
#       "name": "log_event",
#       "anchor": "function-log-event",
#       "kind": "function"
#     },
#     {
#       "id": "configure-logging",
#       "name": "configure_logging",
#       "anchor": "function-configure-logging",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Structured logging utilities for ChunkSort.

Pipeline and CLI modules log through :class:`StructuredLogger`, which folds
persistent ``base_fields`` (such as the pipeline stage) into every record's
``extra_fields``. :func:`configure_logging` installs a single managed stderr
handler on the package logger so stdout stays reserved for the sort report.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

__all__ = [
    "JSONFormatter",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
    "log_event",
]

ROOT_LOGGER_NAME = "ChunkSort"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` as a JSON string with ChunkSort-specific fields."""

        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": now.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "stage": getattr(record, "stage", None),
        }
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            payload.update(record.extra_fields)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class StructuredLogger(logging.LoggerAdapter):
    """Logger adapter that enriches structured logs with shared context."""

    def __init__(
        self, logger: logging.Logger, base_fields: Optional[Dict[str, Any]] = None
    ) -> None:
        """Store underlying logger and initial structured ``base_fields``."""

        super().__init__(logger, {})
        self.base_fields: Dict[str, Any] = dict(base_fields or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        """Merge adapter context into ``extra`` metadata for structured output."""

        extra = kwargs.setdefault("extra", {})
        fields = dict(self.base_fields)
        extra_fields = extra.get("extra_fields")
        if isinstance(extra_fields, dict):
            fields.update(extra_fields)
        extra["extra_fields"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    def bind(self, **fields: object) -> "StructuredLogger":
        """Attach additional persistent fields to the adapter and return ``self``."""

        filtered = {k: v for k, v in fields.items() if v is not None}
        self.base_fields.update(filtered)
        return self

    def child(self, **fields: object) -> "StructuredLogger":
        """Create a new adapter inheriting context with optional overrides."""

        merged = dict(self.base_fields)
        merged.update({k: v for k, v in fields.items() if v is not None})
        return StructuredLogger(self.logger, merged)


def get_logger(name: str, *, base_fields: Optional[Dict[str, Any]] = None) -> StructuredLogger:
    """Return the structured adapter for ``name``.

    Handlers are not attached here; records propagate to the ``ChunkSort``
    package logger configured by :func:`configure_logging`.
    """

    logger = logging.getLogger(name)
    adapter = getattr(logger, "_chunksort_adapter", None)
    if not isinstance(adapter, StructuredLogger):
        adapter = StructuredLogger(logger, base_fields)
        setattr(logger, "_chunksort_adapter", adapter)
    elif base_fields:
        adapter.bind(**base_fields)
    return adapter


def log_event(
    logger: logging.LoggerAdapter | logging.Logger, level: str, message: str, **fields: object
) -> None:
    """Emit a structured log record using the ``extra_fields`` convention."""

    normalised_level = str(level).lower()
    base_stage = getattr(logger, "base_fields", {}).get("stage")
    if normalised_level in {"warning", "error"}:
        fields.setdefault("stage", base_stage or "unknown")
        error_code = fields.get("error_code")
        fields["error_code"] = str(error_code).upper() if error_code else "UNKNOWN"
    elif "stage" not in fields and base_stage is not None:
        fields["stage"] = base_stage

    emitter = getattr(logger, normalised_level, None)
    if not callable(emitter):
        raise AttributeError(f"Logger has no level '{level}'")
    emitter(message, extra={"extra_fields": fields})


def configure_logging(level: str = "INFO", fmt: str = "console") -> logging.Logger:
    """Install a managed stderr handler on the package logger.

    Repeated calls replace the previously managed handler instead of stacking
    duplicates, so the CLI can reconfigure logging per invocation.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_chunksort_managed", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if str(fmt).lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handler._chunksort_managed = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
