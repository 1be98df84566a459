from __future__ import annotations

"""
cache_store – Default key-value stores for record snapshots.

  • MemoryCacheStore   – process-local dict with expiry timestamps
  • JsonFileCacheStore – one JSON file per key under a cache directory

Both deep-copy on write and read so a cached list of dicts round-trips
unchanged and callers can't mutate the stored snapshot.
"""

import copy
import hashlib
import json
import logging
import shutil
import threading
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from sitemapgen.core.interfaces.cache import CacheDuration, CacheStoreProtocol
from sitemapgen.errors import CacheKeyError
from sitemapgen.logging.helpers import get_logger, trace_io

_MISSING = object()


def validate_key(key: Any) -> str:
    """Return *key* if usable, else raise :class:`CacheKeyError`."""
    if not isinstance(key, str) or not key:
        raise CacheKeyError(f'invalid cache key: {key!r}')
    return key


def expires_at(duration: CacheDuration, *, now: float) -> float:
    """Translate *duration* into an absolute epoch timestamp."""
    if isinstance(duration, datetime):
        return duration.timestamp()
    if isinstance(duration, timedelta):
        return now + duration.total_seconds()
    return now + float(duration)


class MemoryCacheStore(CacheStoreProtocol):
    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._data: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._log = logger or get_logger('io.cache')

    def _lookup(self, key: str) -> Any:
        entry = self._data.get(key)
        if entry is None:
            return _MISSING
        deadline, value = entry
        if deadline <= self._clock():
            del self._data[key]
            return _MISSING
        return value

    def has(self, key: str) -> bool:
        key = validate_key(key)
        with self._lock:
            return self._lookup(key) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        key = validate_key(key)
        with self._lock:
            value = self._lookup(key)
        return default if value is _MISSING else copy.deepcopy(value)

    def put(self, key: str, value: Any, duration: CacheDuration) -> None:
        key = validate_key(key)
        deadline = expires_at(duration, now=self._clock())
        with self._lock:
            if deadline <= self._clock():
                self._data.pop(key, None)
                return
            self._data[key] = (deadline, copy.deepcopy(value))
        trace_io(self._log, 'cache put', key=key, expires=deadline)

    def forget(self, key: str) -> bool:
        key = validate_key(key)
        with self._lock:
            return self._data.pop(key, None) is not None

    def flush(self) -> None:
        with self._lock:
            self._data.clear()


class JsonFileCacheStore(CacheStoreProtocol):
    """File-backed store; survives process restarts.

    Each key maps to ``<cache_dir>/<sha1(key)>.json`` holding
    ``{"key", "expires_at", "value"}``. Unreadable files count as misses.
    """

    def __init__(
        self,
        cache_dir: str | Path,
        *,
        clock: Callable[[], float] = time.time,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._dir = Path(cache_dir)
        self._clock = clock
        self._log = logger or get_logger('io.cache')

    @property
    def cache_dir(self) -> Path:
        return self._dir

    def _path_for(self, key: str) -> Path:
        digest = hashlib.sha1(key.encode('utf-8')).hexdigest()
        return self._dir / f'{digest}.json'

    def _read(self, key: str) -> Any:
        path = self._path_for(key)
        if not path.exists():
            return _MISSING
        try:
            blob = json.loads(path.read_text(encoding='utf-8'))
        except (OSError, json.JSONDecodeError) as exc:
            self._log.warning('⚠  unreadable cache file %s: %s', path, exc)
            return _MISSING
        if not isinstance(blob, dict) or blob.get('key') != key:
            return _MISSING
        if float(blob.get('expires_at', 0)) <= self._clock():
            path.unlink(missing_ok=True)
            return _MISSING
        return blob.get('value')

    def has(self, key: str) -> bool:
        return self._read(validate_key(key)) is not _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        value = self._read(validate_key(key))
        return default if value is _MISSING else value

    def put(self, key: str, value: Any, duration: CacheDuration) -> None:
        key = validate_key(key)
        deadline = expires_at(duration, now=self._clock())
        path = self._path_for(key)
        if deadline <= self._clock():
            path.unlink(missing_ok=True)
            return
        self._dir.mkdir(parents=True, exist_ok=True)
        payload = {'key': key, 'expires_at': deadline, 'value': value}
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding='utf-8')
        trace_io(self._log, 'cache put', key=key, path=str(path))

    def forget(self, key: str) -> bool:
        path = self._path_for(validate_key(key))
        existed = path.exists()
        path.unlink(missing_ok=True)
        return existed

    def flush(self) -> None:
        if self._dir.exists():
            shutil.rmtree(self._dir, ignore_errors=True)
            self._log.info('🗑  cache removed → %s', self._dir)
