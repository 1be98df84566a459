from __future__ import annotations

from typing import Optional

from sitemapgen.core.interfaces.cache import CacheStoreProtocol
from sitemapgen.core.interfaces.logging import LoggerLikeProtocol
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel


class CacheGate:
    """Serve or snapshot the model's collection around a render.

    A hit *replaces* the in-memory collection with the cached snapshot,
    discarding records admitted since the cache was warmed. A miss (with
    caching enabled) stores the current collection. Nothing is merged.
    """

    def __init__(self, store: CacheStoreProtocol, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._store = store
        self._log = logger or get_logger('cache')

    @property
    def store(self) -> CacheStoreProtocol:
        return self._store

    def is_cached(self, model: SitemapModel) -> bool:
        return model.use_cache and self._store.has(model.cache_key)

    def apply(self, model: SitemapModel, *, index: bool) -> bool:
        """Run the gate for one render; return True on a cache hit.

        *index* selects the index-entry list instead of the record list.
        """
        if self.is_cached(model):
            snapshot = self._store.get(model.cache_key)
            if isinstance(snapshot, list):
                if index:
                    model.reset_sitemaps(snapshot)
                else:
                    model.reset_items(snapshot)
                self._log.info('cache hit for %r (%d entries)', model.cache_key, len(snapshot))
            else:
                self._log.warning('⚠  cache entry %r is not a list; ignoring', model.cache_key)
            return True

        if model.use_cache:
            collection = model.sitemaps if index else model.items
            self._store.put(model.cache_key, list(collection), model.cache_duration)
            self._log.info('cache miss for %r; stored %d entries', model.cache_key, len(collection))
        return False
