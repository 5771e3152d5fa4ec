from __future__ import annotations

"""Small logging helpers to standardize langpack logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'langpack' logger.
    - get_logger: Namespaced logger factory ('langpack.*').
    - trace utilities gated by LANGPACK_TRACE.

Design notes:
    - The version is resolved lazily to avoid circular imports.
    - Fallback to 'unknown' if the version cannot be imported.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from langpack.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'langpack.resolver').
        - msg: Formatted message string.
        - version: langpack.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from langpack import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("LANGPACK_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'langpack' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger("langpack")
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'langpack'."""
    if not name or name == "langpack":
        return logging.getLogger("langpack")
    if name.startswith("langpack"):
        return logging.getLogger(name)
    return logging.getLogger(f"langpack.{name}")


def is_trace_enabled() -> bool:
    """Check if resolution tracing is enabled via env flag."""
    return os.getenv("LANGPACK_TRACE") == "1"


def trace(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Emit debug-verbosity resolution traces only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx)
    else:
        logger.debug("%s", message)
