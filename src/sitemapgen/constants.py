from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates protocol limits and format names to reduce
cross-module coupling.
"""

# Sitemap protocol ceilings (entries per document).
MAX_ITEMS_DEFAULT: int = 50000
MAX_ITEMS_GOOGLE_NEWS: int = 1000

FORMAT_XML: str = 'xml'
FORMAT_GOOGLE_NEWS: str = 'google-news'
FORMAT_SITEMAP_INDEX: str = 'sitemapindex'

# Formats persisted under their own extension; everything else is ".xml".
PLAIN_EXTENSION_FORMATS = frozenset({'txt', 'html'})
GZIP_SUFFIX: str = '.gz'
GZIP_LEVEL: int = 9

DEFAULT_CACHE_KEY: str = 'sitemapgen.'
DEFAULT_CACHE_DURATION: int = 3600
DEFAULT_STYLES_LOCATION: str = '/vendor/sitemap/styles/'

# Admission-time timestamp layout for googlenews.publication_date.
PUBLICATION_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'

ENV_PREFIX: str = 'SITEMAPGEN_'
