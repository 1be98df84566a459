from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileWriterProtocol(Protocol):
    def write(self, path: str | Path, data: bytes) -> None:
        ...

    def exists(self, path: str | Path) -> bool:
        ...
