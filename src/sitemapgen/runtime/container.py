from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from sitemapgen.config import ConfigRepository, SitemapConfig
from sitemapgen.core.interfaces.cache import CacheStoreProtocol
from sitemapgen.core.interfaces.config import ConfigRepositoryProtocol
from sitemapgen.core.interfaces.fs import FileWriterProtocol
from sitemapgen.core.interfaces.response import ResponseFactoryProtocol
from sitemapgen.core.interfaces.templating import TemplateEngineProtocol
from sitemapgen.core.models import SitemapResponse
from sitemapgen.io.cache_store import JsonFileCacheStore, MemoryCacheStore
from sitemapgen.io.file_writer import LocalFileWriter
from sitemapgen.logging.helpers import get_logger
from sitemapgen.rendering.template_engine import JinjaTemplateEngine
from sitemapgen.sitemap import Sitemap


@dataclass
class SitemapBuilder:
    """Composable builder that wires default collaborators into a Sitemap.

    Any collaborator left as None is built from ``config``.
    """
    config: SitemapConfig
    logger: Optional[logging.Logger] = None
    cache: Optional[CacheStoreProtocol] = None
    config_repository: Optional[ConfigRepositoryProtocol] = None
    files: Optional[FileWriterProtocol] = None
    engine: Optional[TemplateEngineProtocol] = None
    response_factory: ResponseFactoryProtocol = SitemapResponse
    clock: Callable[[], datetime] = datetime.now

    def _build_cache(self, lg: logging.Logger) -> CacheStoreProtocol:
        backend = (self.config.cache_backend or 'memory').lower()
        if backend == 'file':
            return JsonFileCacheStore(Path(self.config.cache_dir), logger=lg)
        if backend != 'memory':
            lg.warning('⚠  unknown cache backend %r; using memory', backend)
        return MemoryCacheStore(logger=lg)

    def build(self) -> Sitemap:
        lg = self.logger or get_logger('sitemap')
        return Sitemap(
            self.config,
            cache=self.cache or self._build_cache(lg),
            config_repository=self.config_repository or ConfigRepository(self.config),
            files=self.files or LocalFileWriter(logger=lg),
            engine=self.engine or JinjaTemplateEngine(template_dirs=self.config.template_dirs, logger=lg),
            response_factory=self.response_factory,
            clock=self.clock,
            logger=lg,
        )


def build_sitemap(config: SitemapConfig | dict[str, Any] | None = None, **overrides: Any) -> Sitemap:
    """Build a ready-to-use Sitemap.

    *config* may be a SitemapConfig, a plain mapping (coerced through
    ``SitemapConfig.from_mapping``) or None for defaults. Keyword
    *overrides* replace individual collaborators (``cache=``, ``files=``,
    ``engine=``, ...).
    """
    if config is None:
        cfg = SitemapConfig()
    elif isinstance(config, SitemapConfig):
        cfg = config
    else:
        cfg = SitemapConfig.from_mapping(config)
    return SitemapBuilder(config=cfg, **overrides).build()
