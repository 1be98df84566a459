from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigRepositoryProtocol(Protocol):
    """Read-only dotted-key configuration lookup (e.g. ``app.url``)."""

    def get(self, key: str, default: Any = None) -> Any:
        ...
