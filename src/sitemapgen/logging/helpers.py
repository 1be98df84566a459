from __future__ import annotations

"""Logger setup shared by the sitemapgen library and its CLI.

Everything logs below the ``sitemapgen`` logger:

    sitemapgen            – CLI and the Sitemap facade when wired by the CLI
    sitemapgen.sitemap    – default facade logger (admission, cache, partition)
    sitemapgen.io.*       – cache stores and the file writer
    sitemapgen.config     – coercion warnings

The library never installs handlers itself; ``setup_base_logger`` is called
by the CLI (through ``DefaultLoggerFactory``). Cache and file IO can emit
extra debug lines with ``SITEMAPGEN_TRACE_IO=1``; their key/value context
is attached to the record as ``context`` and shows up as ``ctx`` in JSON
logs.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

BASE_LOGGER = "sitemapgen"
TRACE_IO_ENV = "SITEMAPGEN_TRACE_IO"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line: ts, level, module, msg, version[, ctx]."""

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Imported late: the package __init__ imports this module indirectly.
        try:
            from sitemapgen import __version__
        except ImportError:
            return os.getenv("SITEMAPGEN_VERSION", "unknown")
        return str(__version__)

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
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
    """Attach one stream handler to the ``sitemapgen`` logger.

    Later calls only adjust the level, so repeated CLI runs in one process
    never duplicate output. The base logger stops propagating to the root
    logger once configured.
    """
    base = logging.getLogger(BASE_LOGGER)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``sitemapgen.<name>`` (or the base logger for an empty name)."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(f"{BASE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv(TRACE_IO_ENV) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx: Any) -> None:
    """Debug-log a cache/file operation when IO tracing is switched on."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s %s", message, " ".join(f"{k}={v}" for k, v in ctx.items()), extra={"context": ctx})
    else:
        logger.debug("%s", message)
