"""
Sitemap facade for sitemapgen.

This module provides:
  • Sitemap – the public entry point: admit records, then either
              render in memory (truncation only) or store to disk
              (truncation or chunk + sitemapindex).

Notes
-----
• Every collaborator is injected (cache store, config repository, file
  writer, template engine, response factory); see
  ``sitemapgen.runtime.container`` for the default wiring.
• One instance per generation request: the model it owns is cleared by
  ``store`` and is not safe for concurrent mutation.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Sequence

from sitemapgen.caching import CacheGate
from sitemapgen.config import SitemapConfig
from sitemapgen.core.interfaces.cache import CacheDuration, CacheStoreProtocol
from sitemapgen.core.interfaces.config import ConfigRepositoryProtocol
from sitemapgen.core.interfaces.fs import FileWriterProtocol
from sitemapgen.core.interfaces.logging import LoggerLikeProtocol
from sitemapgen.core.interfaces.response import ResponseFactoryProtocol
from sitemapgen.core.interfaces.templating import TemplateEngineProtocol
from sitemapgen.core.models import GeneratedDocument, IndexEntry, SitemapResponse
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel
from sitemapgen.partitioning import Partitioner, truncate_for_render
from sitemapgen.processing.admission import RecordAdmission
from sitemapgen.rendering.dispatch import RendererDispatch, is_index_format


class Sitemap:
    def __init__(
        self,
        config: Optional[SitemapConfig],
        *,
        cache: CacheStoreProtocol,
        config_repository: ConfigRepositoryProtocol,
        files: FileWriterProtocol,
        engine: TemplateEngineProtocol,
        response_factory: ResponseFactoryProtocol = SitemapResponse,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('sitemap')
        self.model = SitemapModel.from_config(config or SitemapConfig())
        self._gate = CacheGate(cache, logger=self._log)
        self._dispatch = RendererDispatch(
            engine=engine, config=config_repository, files=files, logger=self._log
        )
        self._admission = RecordAdmission(self.model, clock=clock, logger=self._log)
        self._partitioner = Partitioner(
            render=self._generate_for, files=files, config=config_repository, logger=self._log
        )
        self._response_factory = response_factory

    @property
    def cache(self) -> CacheStoreProtocol:
        return self._gate.store

    # Settings --------------------------------------------------------------

    def set_cache(
        self,
        key: Optional[str] = None,
        duration: Optional[CacheDuration] = None,
        use_cache: bool = True,
    ) -> None:
        self.model.use_cache = use_cache
        if key is not None:
            self.model.cache_key = key
        if duration is not None:
            self.model.cache_duration = duration

    # Admission -------------------------------------------------------------

    def add(
        self,
        loc: Optional[str],
        lastmod: Optional[str] = None,
        priority: Optional[str] = None,
        freq: Optional[str] = None,
        images: Sequence[Mapping[str, Any]] = (),
        title: Optional[str] = None,
        translations: Sequence[Mapping[str, Any]] = (),
        videos: Sequence[Mapping[str, Any]] = (),
        googlenews: Optional[Mapping[str, Any]] = None,
        alternates: Sequence[Mapping[str, Any]] = (),
    ) -> None:
        """Add one record from named fields."""
        self._admission.add(
            loc,
            lastmod=lastmod,
            priority=priority,
            freq=freq,
            images=images,
            title=title,
            translations=translations,
            videos=videos,
            googlenews=googlenews,
            alternates=alternates,
        )

    def add_item(self, params: Any = None) -> None:
        """Add one record descriptor, or every descriptor of a batch."""
        self._admission.add_item(params)

    def add_sitemap(self, loc: str, lastmod: Optional[str] = None) -> None:
        self._admission.add_sitemap(loc, lastmod)

    def reset_sitemaps(self, sitemaps: Sequence[IndexEntry] = ()) -> None:
        self.model.reset_sitemaps(sitemaps)

    # Output ----------------------------------------------------------------

    def is_cached(self) -> bool:
        return self._gate.is_cached(self.model)

    def generate(self, format: str = 'xml', style: Optional[str] = None) -> GeneratedDocument:
        """Render the current collection as *format* (cache gate applied).

        *style* is accepted for call compatibility only; the stylesheet is
        always resolved from ``styles_location``.
        """
        return self._generate_for(self.model, format)

    def render(self, format: str = 'xml', style: Optional[str] = None) -> Any:
        """Truncate to the applicable limit and wrap the document in a response."""
        limit = truncate_for_render(self.model, format)
        if limit is not None:
            self._log.info('truncated %s output to the first %d records', format, limit)
        doc = self.generate(format)
        return self._response_factory(doc.content, 200, dict(doc.headers))

    def store(
        self,
        format: str = 'xml',
        filename: str = 'sitemap',
        path: Optional[str | Path] = None,
        style: Optional[str] = None,
    ) -> Path:
        """Write *format* to ``{path}/{filename}.{ext}``, splitting when needed."""
        return self._partitioner.store(self.model, format, filename, path)

    def _generate_for(self, model: SitemapModel, fmt: str) -> GeneratedDocument:
        self._gate.apply(model, index=is_index_format(fmt))
        return self._dispatch.dispatch(model, fmt)
