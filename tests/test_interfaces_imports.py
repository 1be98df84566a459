def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import sitemapgen.core.interfaces as I

    assert hasattr(I, "CacheStoreProtocol")
    assert hasattr(I, "ConfigRepositoryProtocol")
    assert hasattr(I, "FileWriterProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "ResponseFactoryProtocol")
    assert hasattr(I, "TemplateEngineProtocol")


def test_default_collaborators_satisfy_protocols(tmp_path):
    from sitemapgen.config import ConfigRepository
    from sitemapgen.core.interfaces import (
        CacheStoreProtocol,
        ConfigRepositoryProtocol,
        FileWriterProtocol,
        TemplateEngineProtocol,
    )
    from sitemapgen.io.cache_store import JsonFileCacheStore, MemoryCacheStore
    from sitemapgen.io.file_writer import LocalFileWriter
    from sitemapgen.rendering.template_engine import JinjaTemplateEngine

    assert isinstance(MemoryCacheStore(), CacheStoreProtocol)
    assert isinstance(JsonFileCacheStore(tmp_path), CacheStoreProtocol)
    assert isinstance(LocalFileWriter(), FileWriterProtocol)
    assert isinstance(JinjaTemplateEngine(), TemplateEngineProtocol)
    assert isinstance(ConfigRepository(), ConfigRepositoryProtocol)


def test_loggers_satisfy_logging_protocols():
    from sitemapgen.core.interfaces import LoggerFactoryProtocol, LoggerLikeProtocol
    from sitemapgen.logging.factory import DefaultLoggerFactory
    from sitemapgen.logging.helpers import get_logger

    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(get_logger("io.cache"), LoggerLikeProtocol)
    assert get_logger("io.cache").name == "sitemapgen.io.cache"
    assert get_logger("sitemapgen.config").name == "sitemapgen.config"
    assert get_logger(None).name == "sitemapgen"


def test_components_log_through_injected_logger():
    from sitemapgen import build_sitemap
    from fakes import MemoryWriter, RecordingEngine

    class ListLogger:
        def __init__(self):
            self.lines = []

        def _record(self, level, msg, *args, **kwargs):
            self.lines.append((level, msg % args if args else msg))

        def debug(self, msg, *args, **kwargs):
            self._record("debug", msg, *args)

        def info(self, msg, *args, **kwargs):
            self._record("info", msg, *args)

        def warning(self, msg, *args, **kwargs):
            self._record("warning", msg, *args)

        def error(self, msg, *args, **kwargs):
            self._record("error", msg, *args)

    log = ListLogger()
    sm = build_sitemap({"max_size": 1}, engine=RecordingEngine(), files=MemoryWriter(), logger=log)
    sm.add_item({"loc": "/a"})
    sm.add_item({"loc": "/b"})
    sm.store("xml", "sitemap", "out")

    assert ("debug", "admitted /a (total=1)") in log.lines
    assert any(level == "info" and msg.startswith("splitting 2 records into 2 chunks") for level, msg in log.lines)
