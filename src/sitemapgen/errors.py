from __future__ import annotations

"""Exception hierarchy for sitemapgen.

Only conditions that abort a generation are modelled here. Malformed record
fields are never errors: admission silently falls back to defaults.
"""


class SitemapError(Exception):
    """Base class for all sitemapgen errors."""


class CompressionError(SitemapError, RuntimeError):
    """Raised when gzip compression of a rendered document fails."""


class CacheKeyError(SitemapError, ValueError):
    """Raised by cache stores when a key is empty or not a string."""


class ConfigError(SitemapError, ValueError):
    """Raised when a configuration file cannot be parsed into a mapping."""
