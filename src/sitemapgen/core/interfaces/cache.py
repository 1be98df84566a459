"""
Cache interfaces for sitemapgen.

This module defines a DI-friendly protocol for the key-value store used by
the cache gate. Stores must round-trip a list of dicts unchanged.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Protocol, Union, runtime_checkable

CacheDuration = Union[int, float, timedelta, datetime]


@runtime_checkable
class CacheStoreProtocol(Protocol):
    """Contract for snapshot stores.

    Implementations raise :class:`sitemapgen.errors.CacheKeyError` for keys
    they cannot accept; the error is never recovered by the caller.
    """

    def has(self, key: str) -> bool:
        """Return True if *key* holds a live (non-expired) value."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value for *key* or *default* on a miss."""
        ...

    def put(self, key: str, value: Any, duration: CacheDuration) -> None:
        """Store *value* under *key* for *duration* (seconds, timedelta or absolute datetime)."""
        ...
