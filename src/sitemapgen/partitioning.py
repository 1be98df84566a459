"""
partitioning – Size policies for rendered and persisted sitemaps.

Two policies with different postconditions:

  • truncate_for_render()  – in-memory path; first-N truncation only,
                             never produces an index document.
  • Partitioner.store()    – persist path; renders as-is, truncates
                             (limit mode) or splits into ceiling-sized
                             chunk files tied together by a sitemapindex
                             (split mode). Chunks recurse depth-first.

The model is passed explicitly into every step and is left empty
(records and, after an index render, index entries) once a store
completes. A store that raises leaves both collections as they were
before the call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List, Optional

from sitemapgen.constants import (
    FORMAT_GOOGLE_NEWS,
    FORMAT_SITEMAP_INDEX,
    FORMAT_XML,
    GZIP_SUFFIX,
    MAX_ITEMS_DEFAULT,
    MAX_ITEMS_GOOGLE_NEWS,
    PLAIN_EXTENSION_FORMATS,
)
from sitemapgen.core.interfaces.config import ConfigRepositoryProtocol
from sitemapgen.core.interfaces.fs import FileWriterProtocol
from sitemapgen.core.interfaces.logging import LoggerLikeProtocol
from sitemapgen.core.models import GeneratedDocument, IndexEntry, Record
from sitemapgen.io.compression import encode_output
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel
from sitemapgen.rendering.dispatch import is_index_format

RenderFn = Callable[[SitemapModel, str], GeneratedDocument]


def protocol_ceiling(fmt: str) -> int:
    return MAX_ITEMS_GOOGLE_NEWS if fmt == FORMAT_GOOGLE_NEWS else MAX_ITEMS_DEFAULT


def applicable_ceiling(model: SitemapModel, fmt: str) -> Optional[int]:
    """Return the ceiling the current record count exceeds, if any.

    An explicit ``max_size`` is checked first; the protocol default
    applies only when the explicit one is unset or not exceeded.
    """
    count = len(model.items)
    explicit = model.explicit_max_size
    if explicit is not None and count > explicit:
        return explicit
    default = protocol_ceiling(fmt)
    if count > default:
        return default
    return None


def truncate_for_render(model: SitemapModel, fmt: str) -> Optional[int]:
    """Apply the in-memory policy; return the limit used, if any."""
    ceiling = applicable_ceiling(model, fmt)
    if ceiling is not None:
        model.limit_size(ceiling)
    return ceiling


def file_extension(fmt: str, *, use_gzip: bool) -> str:
    ext = fmt if fmt in PLAIN_EXTENSION_FORMATS else FORMAT_XML
    return f'{ext}{GZIP_SUFFIX}' if use_gzip else ext


def chunked(items: List[Record], size: int) -> Iterator[List[Record]]:
    """Yield consecutive slices of *items* holding at most *size* records."""
    for start in range(0, len(items), size):
        yield items[start:start + size]


class Partitioner:
    def __init__(
        self,
        *,
        render: RenderFn,
        files: FileWriterProtocol,
        config: ConfigRepositoryProtocol,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._render = render
        self._files = files
        self._config = config
        self._log = logger or get_logger('partition')

    def store(
        self,
        model: SitemapModel,
        fmt: str = 'xml',
        filename: str = 'sitemap',
        path: Optional[str | Path] = None,
    ) -> Path:
        """Persist *model* as *fmt* and return the top-level file path.

        Caching is switched off for the duration of the call.
        """
        previous = model.use_cache
        model.use_cache = False
        try:
            return self._store(model, fmt, filename, path)
        finally:
            model.use_cache = previous

    def _store(
        self,
        model: SitemapModel,
        fmt: str,
        filename: str,
        path: Optional[str | Path],
    ) -> Path:
        # A failed render, compression or write restores both collections;
        # chunk files written before the failure stay on disk.
        records = list(model.items)
        sitemaps = list(model.sitemaps)
        try:
            return self._persist(model, fmt, filename, path)
        except Exception:
            model.reset_items(records)
            model.reset_sitemaps(sitemaps)
            raise

    def _persist(
        self,
        model: SitemapModel,
        fmt: str,
        filename: str,
        path: Optional[str | Path],
    ) -> Path:
        ext = file_extension(fmt, use_gzip=model.use_gzip)
        ceiling = applicable_ceiling(model, fmt)
        rendered = fmt

        if ceiling is None:
            doc = self._render(model, fmt)
        elif model.use_limit_size:
            self._log.info('limiting %s to the first %d of %d records', filename, ceiling, len(model.items))
            model.limit_size(ceiling)
            doc = self._render(model, fmt)
        else:
            chunks = list(chunked(model.items, ceiling))
            self._log.info('splitting %d records into %d chunks of %d (%s)', len(model.items), len(chunks), ceiling, filename)
            accumulated = list(model.sitemaps)
            for key, chunk in enumerate(chunks):
                name = f'{filename}-{key}'
                model.reset_items(chunk)
                model.reset_sitemaps()
                self._store(model, fmt, name, path)
                accumulated.append(self._index_entry(name, ext, path))
            model.reset_sitemaps(accumulated)
            rendered = FORMAT_SITEMAP_INDEX
            doc = self._render(model, rendered)

        target = self._target_path(filename, ext, path)
        self._files.write(target, encode_output(doc.content, use_gzip=model.use_gzip))

        if is_index_format(rendered):
            model.reset_sitemaps()
        model.reset_items()
        return target

    def _index_entry(self, name: str, ext: str, path: Optional[str | Path]) -> IndexEntry:
        rel = f'{name}.{ext}'
        if path is not None:
            return {'loc': rel, 'lastmod': None}
        base = str(self._config.get('app.url') or '')
        return {'loc': f"{base.rstrip('/')}/{rel}", 'lastmod': None}

    def _target_path(self, filename: str, ext: str, path: Optional[str | Path]) -> Path:
        root = path if path is not None else self._config.get('app.public_path') or '.'
        return Path(root) / f'{filename}.{ext}'
