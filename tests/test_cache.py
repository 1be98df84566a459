from __future__ import annotations

import tempfile
import unittest
from datetime import datetime, timedelta

from fakes import MemoryWriter, RecordingEngine
from sitemapgen import build_sitemap
from sitemapgen.errors import CacheKeyError
from sitemapgen.io.cache_store import JsonFileCacheStore, MemoryCacheStore


class FakeClock:
    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def _sitemap(store, **cfg):
    cfg.setdefault('use_cache', True)
    cfg.setdefault('cache_key', 'sitemap.test')
    engine = RecordingEngine()
    return build_sitemap(cfg, cache=store, engine=engine, files=MemoryWriter()), engine


class MemoryCacheStoreTests(unittest.TestCase):
    def test_round_trips_list_of_dicts(self) -> None:
        store = MemoryCacheStore()
        value = [{'loc': '/a', 'images': [{'url': '/i'}]}, {'loc': '/b'}]
        store.put('k', value, 60)
        self.assertTrue(store.has('k'))
        self.assertEqual(store.get('k'), value)

    def test_returned_snapshot_is_isolated(self) -> None:
        store = MemoryCacheStore()
        value = [{'loc': '/a'}]
        store.put('k', value, 60)
        value.append({'loc': '/b'})
        got = store.get('k')
        got.append({'loc': '/c'})
        self.assertEqual(store.get('k'), [{'loc': '/a'}])

    def test_entries_expire(self) -> None:
        clock = FakeClock()
        store = MemoryCacheStore(clock=clock)
        store.put('k', [1], 10)
        clock.now += 11
        self.assertFalse(store.has('k'))
        self.assertEqual(store.get('k', 'miss'), 'miss')

    def test_duration_accepts_timedelta_and_datetime(self) -> None:
        clock = FakeClock(datetime(2024, 1, 1).timestamp())
        store = MemoryCacheStore(clock=clock)
        store.put('delta', [1], timedelta(minutes=5))
        store.put('absolute', [2], datetime(2024, 1, 1, 0, 1))
        clock.now += 120
        self.assertTrue(store.has('delta'))
        self.assertFalse(store.has('absolute'))

    def test_invalid_keys_raise(self) -> None:
        store = MemoryCacheStore()
        with self.assertRaises(CacheKeyError):
            store.has('')
        with self.assertRaises(CacheKeyError):
            store.put(None, [], 10)  # type: ignore[arg-type]

    def test_forget_and_flush(self) -> None:
        store = MemoryCacheStore()
        store.put('a', [1], 60)
        store.put('b', [2], 60)
        self.assertTrue(store.forget('a'))
        self.assertFalse(store.has('a'))
        store.flush()
        self.assertFalse(store.has('b'))


class JsonFileCacheStoreTests(unittest.TestCase):
    def test_round_trip_and_expiry(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            clock = FakeClock()
            store = JsonFileCacheStore(td, clock=clock)
            value = [{'loc': '/a', 'googlenews': {'language': 'en'}}]
            store.put('sitemap.k', value, 30)
            self.assertEqual(JsonFileCacheStore(td, clock=clock).get('sitemap.k'), value)
            clock.now += 31
            self.assertFalse(store.has('sitemap.k'))

    def test_corrupt_file_is_a_miss(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            store = JsonFileCacheStore(td)
            store.put('k', [1], 60)
            next(store.cache_dir.glob('*.json')).write_text('{not json', encoding='utf-8')
            self.assertFalse(store.has('k'))

    def test_invalid_key_raises(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(CacheKeyError):
                JsonFileCacheStore(td).get('')


class CacheGateTests(unittest.TestCase):
    def test_is_cached_requires_enabled_cache(self) -> None:
        store = MemoryCacheStore()
        store.put('sitemap.test', [{'loc': '/a'}], 60)
        sm, _ = _sitemap(store, use_cache=False)
        self.assertFalse(sm.is_cached())
        sm.set_cache()
        self.assertTrue(sm.is_cached())

    def test_miss_snapshots_current_records(self) -> None:
        store = MemoryCacheStore()
        sm, _ = _sitemap(store)
        sm.add('/a')
        sm.add('/b')
        self.assertFalse(sm.is_cached())
        sm.generate('xml')
        self.assertEqual([r['loc'] for r in store.get('sitemap.test')], ['/a', '/b'])

    def test_hit_overwrites_new_admissions(self) -> None:
        store = MemoryCacheStore()
        first, _ = _sitemap(store)
        first.add('/cached')
        first.generate('xml')

        second, engine = _sitemap(store)
        second.add('/fresh-1')
        second.add('/fresh-2')
        self.assertTrue(second.is_cached())
        doc = second.generate('xml')
        self.assertEqual([r['loc'] for r in engine.last('xml')['items']], ['/cached'])
        self.assertEqual(doc.content, 'xml:/cached')
        self.assertEqual([r['loc'] for r in second.model.items], ['/cached'])

    def test_sitemapindex_caches_index_entries(self) -> None:
        store = MemoryCacheStore()
        sm, _ = _sitemap(store)
        sm.add('/record')
        sm.add_sitemap('https://example.com/s-0.xml')
        sm.generate('sitemapindex')
        self.assertEqual(store.get('sitemap.test'), [{'loc': 'https://example.com/s-0.xml', 'lastmod': None}])

        other, engine = _sitemap(store)
        other.add_sitemap('https://example.com/new.xml')
        other.generate('sitemapindex')
        self.assertEqual(
            [s['loc'] for s in engine.last('sitemapindex')['sitemaps']],
            ['https://example.com/s-0.xml'],
        )

    def test_non_list_snapshot_is_ignored(self) -> None:
        store = MemoryCacheStore()
        store.put('sitemap.test', {'loc': '/weird'}, 60)
        sm, engine = _sitemap(store)
        sm.add('/a')
        sm.generate('xml')
        self.assertEqual([r['loc'] for r in engine.last('xml')['items']], ['/a'])

    def test_set_cache_overrides_key_and_duration(self) -> None:
        store = MemoryCacheStore()
        sm, _ = _sitemap(store, use_cache=False)
        sm.set_cache('custom.key', timedelta(hours=1))
        self.assertTrue(sm.model.use_cache)
        self.assertEqual(sm.model.cache_key, 'custom.key')
        sm.add('/a')
        sm.generate()
        self.assertTrue(store.has('custom.key'))

    def test_invalid_cache_key_propagates(self) -> None:
        sm, _ = _sitemap(MemoryCacheStore(), cache_key='')
        sm.add('/a')
        with self.assertRaises(CacheKeyError):
            sm.generate('xml')


if __name__ == '__main__':
    unittest.main()
