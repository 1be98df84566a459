from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from sitemapgen.core.interfaces.fs import FileWriterProtocol
from sitemapgen.logging.helpers import get_logger, trace_io


class LocalFileWriter(FileWriterProtocol):
    """Write bytes straight to the local filesystem.

    Parent directories are not created; an unwritable target raises
    ``OSError``. Writes are not atomic.
    """

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.writer')

    def write(self, path: str | Path, data: bytes) -> None:
        target = Path(path)
        trace_io(self._log, 'writing file', path=str(target), size=len(data))
        target.write_bytes(data)
        self._log.info('✔ sitemap written → %s (%d bytes)', target, len(data))

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()
