"""
escaping – XML text escaping applied to records at admission time.

Only characters unsafe inside XML text content are touched:
  • & < > "                 → entity references
  • XML 1.0 disallowed code points (C0 controls except TAB/LF/CR,
    lone surrogates, U+FFFE, U+FFFF) → U+FFFD
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping
from xml.sax.saxutils import escape as _sax_escape

_QUOTE_ENTITIES = {'"': '&quot;'}
_XML_DISALLOWED = re.compile('[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]')
REPLACEMENT_CHAR = '\ufffd'


def escape_xml(text: str) -> str:
    """Return *text* safe for XML text content."""
    return _XML_DISALLOWED.sub(REPLACEMENT_CHAR, _sax_escape(text, _QUOTE_ENTITIES))


def escape_value(value: Any) -> Any:
    """Escape strings, pass every other value through unchanged."""
    return escape_xml(value) if isinstance(value, str) else value


def escape_entries(entries: List[Any]) -> List[Any]:
    """Escape every string value of each mapping in *entries*.

    Non-mapping entries are kept as they are.
    """
    out: List[Any] = []
    for entry in entries:
        if isinstance(entry, Mapping):
            out.append({k: escape_value(v) for k, v in entry.items()})
        else:
            out.append(entry)
    return out
