from __future__ import annotations

import logging
from typing import Any, Optional

from sitemapgen.caching import CacheGate
from sitemapgen.config import ConfigRepository, SitemapConfig
from sitemapgen.core.models import GeneratedDocument, SitemapResponse
from sitemapgen.errors import CacheKeyError, CompressionError, ConfigError, SitemapError
from sitemapgen.io.cache_store import JsonFileCacheStore, MemoryCacheStore
from sitemapgen.io.file_writer import LocalFileWriter
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel
from sitemapgen.partitioning import Partitioner
from sitemapgen.rendering.dispatch import FORMATS, RendererDispatch
from sitemapgen.rendering.template_engine import JinjaTemplateEngine
from sitemapgen.runtime.container import SitemapBuilder, build_sitemap
from sitemapgen.sitemap import Sitemap

__version__ = '1.0.0'


def sitemap_factory(
    config: SitemapConfig | dict[str, Any] | None = None,
    *,
    logger: Optional[logging.Logger] = None,
    **overrides: Any,
) -> Sitemap:
    """Factory helper that returns a Sitemap wired with default collaborators.

    Falls back to a ``sitemapgen.sitemap`` logger when none is provided.
    """
    return build_sitemap(config, logger=logger or get_logger('sitemap'), **overrides)


__all__ = [
    'Sitemap',
    'SitemapBuilder',
    'SitemapConfig',
    'SitemapModel',
    'SitemapResponse',
    'GeneratedDocument',
    'ConfigRepository',
    'CacheGate',
    'MemoryCacheStore',
    'JsonFileCacheStore',
    'LocalFileWriter',
    'JinjaTemplateEngine',
    'RendererDispatch',
    'Partitioner',
    'FORMATS',
    'SitemapError',
    'CompressionError',
    'CacheKeyError',
    'ConfigError',
    'build_sitemap',
    'sitemap_factory',
]
