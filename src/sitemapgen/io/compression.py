from __future__ import annotations

import gzip
import zlib

from sitemapgen.constants import GZIP_LEVEL
from sitemapgen.errors import CompressionError


def encode_output(content: str, *, use_gzip: bool, level: int = GZIP_LEVEL) -> bytes:
    """Return UTF-8 bytes for *content*, gzip-compressed when requested."""
    data = content.encode('utf-8')
    if not use_gzip:
        return data
    try:
        return gzip.compress(data, compresslevel=level)
    except (ValueError, zlib.error) as exc:
        raise CompressionError(f'failed to compress sitemap: {exc}') from exc
