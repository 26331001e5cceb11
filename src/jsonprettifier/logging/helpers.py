from __future__ import annotations

"""Small logging helpers to standardize jsonprettifier logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Root logger configuration for the 'jsonprettifier' logger.
    - get_logger: Namespaced logger factory ('jsonprettifier.*').
    - trace_io utilities gated by JSONPRETTIFIER_TRACE_IO.

Design notes:
    - The version is resolved lazily to avoid circular imports and falls back
      to 'unknown' if it cannot be imported.
    - Worker threads log concurrently; the ordering of interleaved per-file
      messages is unspecified.
"""

import logging
import os
from typing import Optional, TextIO

from jsonprettifier.constants import ENV_TRACE_IO

BASE_LOGGER = "jsonprettifier"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'jsonprettifier.pipeline').
        - msg: Formatted message string.
        - version: jsonprettifier.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            from jsonprettifier import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("JSONPRETTIFIER_VERSION", "unknown")

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

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'jsonprettifier' logger and return it.

    Any handler installed by a previous call is replaced, so the CLI can be
    run repeatedly in one process (tests) against different streams.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stdout by default; CLI messages go to stdout).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER)
    for h in list(base.handlers):
        base.removeHandler(h)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stdout)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        # User-facing output: the message alone, no level prefix.
        handler.setFormatter(logging.Formatter("%(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'jsonprettifier'."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context, attached to the record as 'context'.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
