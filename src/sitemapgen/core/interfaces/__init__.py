from .cache import CacheDuration, CacheStoreProtocol
from .config import ConfigRepositoryProtocol
from .fs import FileWriterProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .response import ResponseFactoryProtocol
from .templating import TemplateEngineProtocol

__all__ = [
    'CacheDuration',
    'CacheStoreProtocol',
    'ConfigRepositoryProtocol',
    'FileWriterProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'ResponseFactoryProtocol',
    'TemplateEngineProtocol',
]
