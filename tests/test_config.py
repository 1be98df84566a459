from __future__ import annotations

import json
import logging
import os
import tempfile
import unittest
from datetime import timedelta
from pathlib import Path

import pytest

from sitemapgen.config import (
    DEFAULT_CONFIG,
    ConfigRepository,
    SitemapConfig,
    config_from_env,
    load_config_file,
    merge_config,
)
from sitemapgen.errors import ConfigError, SitemapError
from sitemapgen.model import SitemapModel


class FromMappingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.log = logging.getLogger('tests.sitemapgen.config')

    def test_defaults(self) -> None:
        cfg = SitemapConfig()
        self.assertFalse(cfg.use_cache)
        self.assertTrue(cfg.escaping)
        self.assertTrue(cfg.use_styles)
        self.assertEqual(cfg.cache_duration, 3600)
        self.assertEqual(cfg.styles_location, '/vendor/sitemap/styles/')
        self.assertIsNone(cfg.max_size)
        self.assertEqual(set(cfg.as_dict()), set(DEFAULT_CONFIG))

    def test_string_values_are_coerced(self) -> None:
        cfg = SitemapConfig.from_mapping(
            {
                'use_cache': 'yes',
                'use_gzip': '0',
                'max_size': '20',
                'cache_duration': '60',
                'template_dirs': 'tpl',
                'styles_location': '',
                'app_url': 'https://example.com',
            },
            logger=self.log,
        )
        self.assertTrue(cfg.use_cache)
        self.assertFalse(cfg.use_gzip)
        self.assertEqual(cfg.max_size, 20)
        self.assertEqual(cfg.cache_duration, 60)
        self.assertEqual(cfg.template_dirs, ('tpl',))
        self.assertIsNone(cfg.styles_location)
        self.assertEqual(cfg.app_url, 'https://example.com')

    def test_timedelta_duration_is_kept(self) -> None:
        cfg = SitemapConfig.from_mapping({'cache_duration': timedelta(minutes=5)}, logger=self.log)
        self.assertEqual(cfg.cache_duration, timedelta(minutes=5))

    def test_invalid_values_fall_back_with_warning(self) -> None:
        with self.assertLogs('tests.sitemapgen.config', level='WARNING') as cm:
            cfg = SitemapConfig.from_mapping({'use_cache': 'maybe', 'max_size': 'lots'}, logger=self.log)
        self.assertFalse(cfg.use_cache)
        self.assertIsNone(cfg.max_size)
        self.assertEqual(len(cm.output), 2)

    def test_unknown_keys_are_ignored(self) -> None:
        cfg = SitemapConfig.from_mapping({'nope': 1, 'escaping': False}, logger=self.log)
        self.assertFalse(cfg.escaping)

    def test_model_copies_settings(self) -> None:
        cfg = SitemapConfig.from_mapping({'use_limit_size': True, 'max_size': 7, 'cache_key': 'k'})
        model = SitemapModel.from_config(cfg)
        self.assertTrue(model.use_limit_size)
        self.assertEqual(model.max_size, 7)
        self.assertEqual(model.cache_key, 'k')
        self.assertEqual(model.items, [])
        self.assertIsNone(model.title)


class LoadTests(unittest.TestCase):
    def test_precedence_file_env_overrides(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td, 'cfg.json')
            path.write_text(json.dumps({'app_url': 'https://file.test', 'max_size': 10, 'use_gzip': True}), encoding='utf-8')
            cfg = SitemapConfig.load(
                path=path,
                environ={'SITEMAPGEN_APP_URL': 'https://env.test', 'SITEMAPGEN_USE_STYLES': 'off'},
                overrides={'max_size': 5, 'use_gzip': None},
            )
        self.assertEqual(cfg.app_url, 'https://env.test')
        self.assertFalse(cfg.use_styles)
        self.assertEqual(cfg.max_size, 5)
        self.assertTrue(cfg.use_gzip)

    def test_env_template_dirs_split_on_pathsep(self) -> None:
        env = {'SITEMAPGEN_TEMPLATE_DIRS': os.pathsep.join(['a', '', 'b'])}
        self.assertEqual(config_from_env(env), {'template_dirs': ('a', 'b')})

    def test_invalid_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            bad = Path(td, 'bad.json')
            bad.write_text('{oops', encoding='utf-8')
            with self.assertRaises(ConfigError):
                load_config_file(bad)
            bad.write_text('[1, 2]', encoding='utf-8')
            with self.assertRaises(ConfigError):
                load_config_file(bad)


class ConfigRepositoryTests(unittest.TestCase):
    def test_dotted_lookup(self) -> None:
        repo = ConfigRepository(SitemapConfig(app_url='https://example.com', public_path='/srv/www'))
        self.assertEqual(repo.get('app.url'), 'https://example.com')
        self.assertEqual(repo.get('app.public_path'), '/srv/www')
        self.assertEqual(repo.get('sitemap.use_styles'), True)
        self.assertEqual(repo.get('sitemap.missing', 'd'), 'd')
        self.assertEqual(repo.get('database.host', 'd'), 'd')


def test_merge_config_skips_none() -> None:
    assert merge_config({'a': 1, 'b': 2}, {'a': None, 'b': 3, 'c': 4}) == {'a': 1, 'b': 3, 'c': 4}
    assert merge_config(None, None) == {}


def test_config_error_is_sitemap_and_value_error() -> None:
    with pytest.raises(SitemapError):
        raise ConfigError('x')
    assert issubclass(ConfigError, ValueError)


if __name__ == '__main__':
    unittest.main()
