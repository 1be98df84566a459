"""
Renderer dispatch for sitemapgen.

This module provides:
  • FORMATS          – format tag → OutputFormat lookup table
  • resolve_format() – table lookup with the generic-XML fallback arm
  • RendererDispatch – channel defaults, stylesheet resolution and the
                       final template call producing a GeneratedDocument

Cache handling is not done here; the caller swaps model collections
through the cache gate before dispatching.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from sitemapgen.constants import FORMAT_SITEMAP_INDEX
from sitemapgen.core.interfaces.config import ConfigRepositoryProtocol
from sitemapgen.core.interfaces.fs import FileWriterProtocol
from sitemapgen.core.interfaces.logging import LoggerLikeProtocol
from sitemapgen.core.interfaces.templating import TemplateEngineProtocol
from sitemapgen.core.models import GeneratedDocument, OutputFormat
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel

CONTENT_TYPE_HEADER = 'Content-Type'
XML_CONTENT_TYPE = 'text/xml; charset=utf-8'

FORMATS: Mapping[str, OutputFormat] = {
    'ror-rss': OutputFormat('ror-rss', 'text/rss+xml; charset=utf-8', with_channel=True),
    'ror-rdf': OutputFormat('ror-rdf', 'text/rdf+xml; charset=utf-8', with_channel=True),
    'html': OutputFormat('html', 'text/html; charset=utf-8', with_channel=True),
    'txt': OutputFormat('txt', 'text/plain; charset=utf-8'),
    FORMAT_SITEMAP_INDEX: OutputFormat(FORMAT_SITEMAP_INDEX, XML_CONTENT_TYPE, payload='sitemaps'),
}


def resolve_format(fmt: str) -> OutputFormat:
    """Return the dispatch arm for *fmt*; unknown tags render as XML."""
    known = FORMATS.get(fmt)
    if known is not None:
        return known
    return OutputFormat(template=fmt, content_type=XML_CONTENT_TYPE)


def is_index_format(fmt: str) -> bool:
    return resolve_format(fmt).payload == 'sitemaps'


class RendererDispatch:
    """Turn the model's current collections into a rendered document."""

    def __init__(
        self,
        *,
        engine: TemplateEngineProtocol,
        config: ConfigRepositoryProtocol,
        files: FileWriterProtocol,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._engine = engine
        self._config = config
        self._files = files
        self._log = logger or get_logger('render')

    def channel(self, model: SitemapModel) -> Dict[str, Optional[str]]:
        """Fill in link/title defaults on *model* and return the channel map."""
        if not model.link:
            url = self._config.get('app.url')
            if isinstance(url, str):
                model.link = url
        if not model.title:
            model.title = f'Sitemap for {model.link}'
        return {'title': model.title, 'link': model.link}

    def resolve_style(self, model: SitemapModel, fmt: str) -> Optional[str]:
        """Return the stylesheet reference for *fmt*, or None.

        The reference is ``{styles_location}{fmt}.xsl`` and is only emitted
        while styling is enabled and that file exists under the public root.
        """
        if not model.use_styles:
            return None
        if not model.styles_location:
            return None
        candidate = f'{model.styles_location}{fmt}.xsl'
        public = Path(self._config.get('app.public_path') or '.')
        if self._files.exists(public / candidate.lstrip('/')):
            return candidate
        return None

    def dispatch(self, model: SitemapModel, fmt: str) -> GeneratedDocument:
        arm = resolve_format(fmt)
        if fmt not in FORMATS:
            self._log.debug('format %r uses the generic XML dispatch', fmt)

        channel = self.channel(model)
        data: Dict[str, Any] = {'style': self.resolve_style(model, fmt)}
        if arm.payload == 'sitemaps':
            data['sitemaps'] = list(model.sitemaps)
        else:
            data['items'] = list(model.items)
        if arm.with_channel:
            data['channel'] = channel

        content = self._engine.render(arm.template, data)
        return GeneratedDocument(content=content, headers={CONTENT_TYPE_HEADER: arm.content_type})
