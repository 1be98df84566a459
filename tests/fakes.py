"""In-test collaborators shared by the suites."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple


class RecordingEngine:
    """Template engine that records every call and renders a short summary."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        snapshot = dict(data)
        snapshot['items'] = list(data.get('items', []))
        snapshot['sitemaps'] = list(data.get('sitemaps', []))
        self.calls.append((template_name, snapshot))
        rows = snapshot['sitemaps'] if template_name == 'sitemapindex' else snapshot['items']
        return f"{template_name}:" + ",".join(str(r.get('loc')) for r in rows)

    def last(self, template_name: str) -> Dict[str, Any]:
        for name, data in reversed(self.calls):
            if name == template_name:
                return data
        raise AssertionError(f'template {template_name!r} was never rendered')


class MemoryWriter:
    """File writer keeping output in a dict keyed by path string."""

    def __init__(self, existing: Tuple[str, ...] = ()) -> None:
        self.files: Dict[str, bytes] = {}
        self.order: List[str] = []
        self._existing = {str(Path(p)) for p in existing}

    def write(self, path, data: bytes) -> None:
        key = str(Path(path))
        self.files[key] = data
        self.order.append(key)

    def exists(self, path) -> bool:
        return str(Path(path)) in self._existing


class FailingWriter(MemoryWriter):
    """MemoryWriter whose *fail_on*-th write (1-based) raises OSError."""

    def __init__(self, fail_on: int, existing: Tuple[str, ...] = ()) -> None:
        super().__init__(existing)
        self._fail_on = fail_on
        self.attempts = 0

    def write(self, path, data: bytes) -> None:
        self.attempts += 1
        if self.attempts == self._fail_on:
            raise OSError(28, 'No space left on device', str(path))
        super().write(path, data)
