from __future__ import annotations
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for named-template renderers."""

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        ...
