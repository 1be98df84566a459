from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping

# Which model collection a format renders from.
Payload = Literal['items', 'sitemaps']

# Records and index entries stay plain dicts so cache stores can round-trip them.
Record = Dict[str, Any]
IndexEntry = Dict[str, Any]


@dataclass(frozen=True)
class OutputFormat:
    """Dispatch arm for one output flavor."""
    template: str
    content_type: str
    payload: Payload = 'items'
    with_channel: bool = False


@dataclass(frozen=True)
class GeneratedDocument:
    content: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers.get('Content-Type', '')


@dataclass(frozen=True)
class SitemapResponse:
    """Plain HTTP-style response returned by :meth:`Sitemap.render`."""
    content: str
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)
