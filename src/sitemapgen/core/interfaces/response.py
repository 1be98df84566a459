from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class ResponseFactoryProtocol(Protocol):
    """Builds an HTTP-style response object from rendered content."""

    def __call__(self, content: str, status: int, headers: Mapping[str, str]) -> Any:
        ...
