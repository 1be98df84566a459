from __future__ import annotations

"""
model – Transient record container for one generation request.

The model owns the ordered record list, the ordered index-entry list and
the generation settings. It is passed explicitly to the cache gate and the
partitioner; nothing here is process-wide.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from sitemapgen.config import SitemapConfig
from sitemapgen.constants import (
    DEFAULT_CACHE_DURATION,
    DEFAULT_CACHE_KEY,
    DEFAULT_STYLES_LOCATION,
    MAX_ITEMS_DEFAULT,
)
from sitemapgen.core.interfaces.cache import CacheDuration
from sitemapgen.core.models import IndexEntry, Record


@dataclass
class SitemapModel:
    use_cache: bool = False
    cache_key: str = DEFAULT_CACHE_KEY
    cache_duration: CacheDuration = DEFAULT_CACHE_DURATION
    escaping: bool = True
    use_limit_size: bool = False
    max_size: Optional[int] = None
    use_gzip: bool = False
    use_styles: bool = True
    styles_location: Optional[str] = DEFAULT_STYLES_LOCATION
    title: Optional[str] = None
    link: Optional[str] = None
    _items: List[Record] = field(default_factory=list, init=False, repr=False)
    _sitemaps: List[IndexEntry] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_config(cls, config: SitemapConfig) -> 'SitemapModel':
        return cls(
            use_cache=config.use_cache,
            cache_key=config.cache_key,
            cache_duration=config.cache_duration,
            escaping=config.escaping,
            use_limit_size=config.use_limit_size,
            max_size=config.max_size,
            use_gzip=config.use_gzip,
            use_styles=config.use_styles,
            styles_location=config.styles_location,
        )

    # Collections -----------------------------------------------------------

    @property
    def items(self) -> List[Record]:
        return self._items

    @property
    def sitemaps(self) -> List[IndexEntry]:
        return self._sitemaps

    def add_record(self, record: Record) -> None:
        self._items.append(record)

    def add_sitemap(self, entry: IndexEntry) -> None:
        self._sitemaps.append(entry)

    def reset_items(self, items: Iterable[Record] = ()) -> None:
        self._items = list(items)

    def reset_sitemaps(self, sitemaps: Iterable[IndexEntry] = ()) -> None:
        self._sitemaps = list(sitemaps)

    def limit_size(self, maximum: int = MAX_ITEMS_DEFAULT) -> None:
        """Keep only the first *maximum* records (insertion order)."""
        del self._items[maximum:]

    # Settings helpers ------------------------------------------------------

    @property
    def explicit_max_size(self) -> Optional[int]:
        """Return ``max_size`` when it is a positive override, else None."""
        if self.max_size is not None and self.max_size > 0:
            return self.max_size
        return None

    def __len__(self) -> int:
        return len(self._items)
