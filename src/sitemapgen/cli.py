from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, NoReturn, Optional, Sequence

from sitemapgen.config import SitemapConfig
from sitemapgen.errors import ConfigError
from sitemapgen.logging.factory import DefaultLoggerFactory
from sitemapgen.logging.helpers import get_logger
from sitemapgen.runtime.container import build_sitemap

logger = get_logger('sitemapgen')


class CliError(Exception):
    """Input problem reported to the user with exit code 2."""


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    global logger
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    logger = factory.get_logger('sitemapgen')


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sitemapgen',
        description='Render or store sitemaps from JSON / JSONL record files.',
    )
    parser.add_argument('--config', metavar='FILE', help='JSON configuration file')
    parser.add_argument('--json-logs', action='store_true', help='emit logs as JSON lines')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    def _common(p: argparse.ArgumentParser) -> None:
        p.add_argument('input', help="JSON array, JSONL file, or '-' for stdin")
        p.add_argument('-f', '--format', default='xml', help='output format (default: xml)')
        p.add_argument('--max-size', type=int, default=None, dest='max_size')
        p.add_argument('--app-url', default=None, dest='app_url')
        p.add_argument('--no-escaping', action='store_false', dest='escaping', default=None)
        p.add_argument('--no-styles', action='store_false', dest='use_styles', default=None)

    render = sub.add_parser('render', help='print the document to stdout')
    _common(render)

    store = sub.add_parser('store', help='write the document (and chunks) to disk')
    _common(store)
    store.add_argument('-n', '--filename', default='sitemap')
    store.add_argument('-o', '--output-dir', default=None, dest='output_dir')
    store.add_argument('--limit', action='store_true', dest='use_limit_size', default=None,
                       help='truncate instead of splitting into an index')
    store.add_argument('--gzip', action='store_true', dest='use_gzip', default=None)
    return parser


def load_records(source: str) -> List[Any]:
    """Read records from a JSON array / JSONL file (``-`` = stdin)."""
    text = sys.stdin.read() if source == '-' else Path(source).read_text(encoding='utf-8')
    stripped = text.strip()
    if not stripped:
        return []
    if stripped.startswith('['):
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise CliError(f'invalid JSON input: {exc}') from exc
        return list(data)

    records: List[Any] = []
    for lineno, line in enumerate(stripped.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise CliError(f'invalid JSON on line {lineno}: {exc}') from exc
    return records


def _overrides(ns: argparse.Namespace) -> Dict[str, Any]:
    keys = ('max_size', 'app_url', 'escaping', 'use_styles', 'use_limit_size', 'use_gzip')
    return {k: getattr(ns, k, None) for k in keys}


class SitemapCli:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run one command and return the rendered text or the written path."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SITEMAPGEN_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        try:
            cfg = SitemapConfig.load(path=ns.config, overrides=_overrides(ns), logger=logger)
        except (ConfigError, OSError) as exc:
            raise CliError(str(exc)) from exc

        try:
            records = load_records(ns.input)
        except OSError as exc:
            raise CliError(f'cannot read {ns.input}: {exc}') from exc

        sitemap = build_sitemap(cfg, logger=logger)
        for record in records:
            sitemap.add_item(record)
        logger.info('loaded %d records from %s', len(sitemap.model.items), ns.input)

        if ns.command == 'render':
            return sitemap.render(ns.format).content

        written = sitemap.store(ns.format, ns.filename, ns.output_dir)
        return str(written)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the ``sitemapgen`` console script."""
    try:
        out = SitemapCli.run(sys.argv[1:] if argv is None else argv)
        sys.stdout.write(out if out.endswith('\n') else out + '\n')
        raise SystemExit(0)
    except CliError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)


if __name__ == '__main__':
    main()
