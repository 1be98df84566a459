from __future__ import annotations

import logging
from typing import Optional, TextIO

from sitemapgen.core.interfaces.logging import LoggerFactoryProtocol
from sitemapgen.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory(LoggerFactoryProtocol):
    """Hand out ``sitemapgen.*`` loggers, installing the stream handler lazily.

    The CLI builds one of these per run; plain-text or JSON output is fixed
    at construction time.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._configured = False

    @property
    def json_logs(self) -> bool:
        return self._json

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
            self._configured = True
        return get_logger(name)
