"""
admission – Normalize submitted records and append them to the model.

Rules applied to one record descriptor:
  • loc defaults to "/" when missing or not a string
  • list fields (images, translations, alternates, videos) default to []
  • with escaping on: loc, every string inside images/translations/
    alternates entries, non-empty video title/description and
    googlenews.sitename are XML-escaped
  • googlenews gets sitename="", language="en" and an admission-time
    publication_date when those are absent

Escaping happens here and only here; re-admitting an escaped record
escapes it again.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from sitemapgen.constants import PUBLICATION_DATE_FORMAT
from sitemapgen.core.interfaces.logging import LoggerLikeProtocol
from sitemapgen.core.models import Record
from sitemapgen.logging.helpers import get_logger
from sitemapgen.model import SitemapModel
from sitemapgen.processing.escaping import escape_entries, escape_xml

_LIST_FIELDS = ('images', 'translations', 'alternates', 'videos')
_SCALAR_FIELDS = ('lastmod', 'priority', 'freq', 'title')


def is_batch(params: Any) -> bool:
    """Return True when *params* holds several record descriptors.

    Detection looks for a second positional entry: index 1 of a non-string
    sequence, or key ``1`` / ``'1'`` of a mapping. Anything else, an empty
    or one-element list included, is a single (possibly malformed)
    descriptor.
    """
    if isinstance(params, Mapping):
        return 1 in params or '1' in params
    if isinstance(params, (str, bytes)):
        return False
    return isinstance(params, Sequence) and len(params) > 1


def _iter_batch(params: Any) -> Iterable[Any]:
    if isinstance(params, Mapping):
        return params.values()
    return params


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _escape_videos(videos: List[Any]) -> List[Any]:
    out: List[Any] = []
    for video in videos:
        if not isinstance(video, Mapping):
            out.append(video)
            continue
        video = dict(video)
        for key in ('title', 'description'):
            if video.get(key) and isinstance(video[key], str):
                video[key] = escape_xml(video[key])
        out.append(video)
    return out


def normalize_record(
    params: Any,
    *,
    escaping: bool = True,
    now: Optional[datetime] = None,
) -> Record:
    """Return a fully-defaulted (and optionally escaped) record dict."""
    params = params if isinstance(params, Mapping) else {}

    loc = params.get('loc')
    if not isinstance(loc, str):
        loc = '/'

    lists = {key: _as_list(params.get(key)) for key in _LIST_FIELDS}
    googlenews = params.get('googlenews')
    googlenews = dict(googlenews) if isinstance(googlenews, Mapping) else {}

    if escaping:
        loc = escape_xml(loc)
        for key in ('images', 'translations', 'alternates'):
            lists[key] = escape_entries(lists[key])
        lists['videos'] = _escape_videos(lists['videos'])
        if isinstance(googlenews.get('sitename'), str):
            googlenews['sitename'] = escape_xml(googlenews['sitename'])

    if googlenews.get('sitename') is None:
        googlenews['sitename'] = ''
    if googlenews.get('language') is None:
        googlenews['language'] = 'en'
    if googlenews.get('publication_date') is None:
        googlenews['publication_date'] = (now or datetime.now()).strftime(PUBLICATION_DATE_FORMAT)

    record: Record = {'loc': loc}
    for key in _SCALAR_FIELDS:
        record[key] = params.get(key)
    record.update(lists)
    record['googlenews'] = googlenews
    return record


class RecordAdmission:
    """Admit records (single or batch) into a :class:`SitemapModel`."""

    def __init__(
        self,
        model: SitemapModel,
        *,
        clock: Callable[[], datetime] = datetime.now,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._model = model
        self._clock = clock
        self._log = logger or get_logger('admission')

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
        self.add_item({
            'loc': loc,
            'lastmod': lastmod,
            'priority': priority,
            'freq': freq,
            'images': list(images),
            'title': title,
            'translations': list(translations),
            'videos': list(videos),
            'googlenews': dict(googlenews or {}),
            'alternates': list(alternates),
        })

    def add_item(self, params: Any = None) -> None:
        if is_batch(params):
            for sub in _iter_batch(params):
                self.add_item(sub)
            return

        record = normalize_record(params, escaping=self._model.escaping, now=self._clock())
        self._model.add_record(record)
        self._log.debug('admitted %s (total=%d)', record['loc'], len(self._model))

    def add_sitemap(self, loc: str, lastmod: Optional[str] = None) -> None:
        self._model.add_sitemap({'loc': loc, 'lastmod': lastmod})
