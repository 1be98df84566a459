"""
Logging interfaces for sitemapgen.

The Sitemap facade, cache gate, renderer dispatch and partitioner accept any
object with the four level methods below; ``logging.Logger`` satisfies it.
The CLI obtains its logger through a ``LoggerFactoryProtocol``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Level methods the sitemap components log through (%-style args)."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    def get_logger(self, name: str) -> LoggerLikeProtocol:
        """Return the logger for *name*, configuring output on first use."""
        ...
