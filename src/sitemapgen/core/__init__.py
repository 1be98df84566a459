from __future__ import annotations

"""Public surface for sitemapgen.core.

This module exposes protocol types and value objects for downstream
consumers, so that collaborators can be typed against a stable location:

    from sitemapgen.core import CacheStoreProtocol, GeneratedDocument, ...
"""

from sitemapgen.core.interfaces import (
    CacheDuration,
    CacheStoreProtocol,
    ConfigRepositoryProtocol,
    FileWriterProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    ResponseFactoryProtocol,
    TemplateEngineProtocol,
)
from sitemapgen.core.models import (
    GeneratedDocument,
    IndexEntry,
    OutputFormat,
    Record,
    SitemapResponse,
)

__all__ = [
    # Protocols
    "CacheDuration",
    "CacheStoreProtocol",
    "ConfigRepositoryProtocol",
    "FileWriterProtocol",
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "ResponseFactoryProtocol",
    "TemplateEngineProtocol",
    # Value objects
    "GeneratedDocument",
    "IndexEntry",
    "OutputFormat",
    "Record",
    "SitemapResponse",
]
