from __future__ import annotations

"""Configuration layer for sitemapgen.

Provides:
  • DEFAULT_CONFIG       – plain-dict defaults (single source of truth)
  • merge_config()       – shallow merge ignoring ``None`` overrides
  • config_from_env()    – ``SITEMAPGEN_*`` environment overrides
  • load_config_file()   – JSON object loader
  • SitemapConfig        – frozen, typed view built from any of the above
  • ConfigRepository     – dotted-key lookup used by the core (``app.url``)
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from sitemapgen.constants import (
    DEFAULT_CACHE_DURATION,
    DEFAULT_CACHE_KEY,
    DEFAULT_STYLES_LOCATION,
    ENV_PREFIX,
)
from sitemapgen.core.interfaces.cache import CacheDuration
from sitemapgen.core.interfaces.config import ConfigRepositoryProtocol
from sitemapgen.errors import ConfigError
from sitemapgen.logging.helpers import get_logger

DEFAULT_CONFIG: Dict[str, Any] = {
    "use_cache": False,
    "cache_key": DEFAULT_CACHE_KEY,
    "cache_duration": DEFAULT_CACHE_DURATION,
    "escaping": True,
    "use_limit_size": False,
    "use_styles": True,
    "styles_location": DEFAULT_STYLES_LOCATION,
    "max_size": None,
    "use_gzip": False,
    "app_url": "http://localhost",
    "public_path": "public",
    "template_dirs": (),
    "cache_backend": "memory",
    "cache_dir": ".sitemapgen_cache",
}

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def merge_config(base: Optional[Mapping[str, Any]], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a new dict with *override* applied on top of *base*.

    ``None`` values in *override* never replace a base value, so partially
    filled CLI namespaces can be merged directly.
    """
    merged = dict(base or {})
    for key, value in (override or {}).items():
        if value is not None:
            merged[key] = value
    return merged


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect raw ``SITEMAPGEN_<KEY>`` overrides for every known key."""
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for key in DEFAULT_CONFIG:
        raw = env.get(f"{ENV_PREFIX}{key.upper()}")
        if raw is None:
            continue
        if key == "template_dirs":
            out[key] = tuple(p for p in raw.split(os.pathsep) if p)
        else:
            out[key] = raw
    return out


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Load a JSON configuration object from *path*."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    return data


def _as_bool(value: Any, default: bool, key: str, log: logging.Logger) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        low = value.strip().lower()
        if low in _TRUE:
            return True
        if low in _FALSE:
            return False
    log.warning("⚠  invalid boolean for %s: %r; using %r", key, value, default)
    return default


def _as_int(value: Any, default: Optional[int], key: str, log: logging.Logger) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        log.warning("⚠  invalid integer for %s: %r; using %r", key, value, default)
        return default


@dataclass(frozen=True)
class SitemapConfig:
    """Immutable generation settings plus environment lookups."""
    use_cache: bool = DEFAULT_CONFIG["use_cache"]
    cache_key: str = DEFAULT_CONFIG["cache_key"]
    cache_duration: CacheDuration = DEFAULT_CONFIG["cache_duration"]
    escaping: bool = DEFAULT_CONFIG["escaping"]
    use_limit_size: bool = DEFAULT_CONFIG["use_limit_size"]
    use_styles: bool = DEFAULT_CONFIG["use_styles"]
    styles_location: Optional[str] = DEFAULT_CONFIG["styles_location"]
    max_size: Optional[int] = DEFAULT_CONFIG["max_size"]
    use_gzip: bool = DEFAULT_CONFIG["use_gzip"]
    app_url: str = DEFAULT_CONFIG["app_url"]
    public_path: str = DEFAULT_CONFIG["public_path"]
    template_dirs: Tuple[str, ...] = DEFAULT_CONFIG["template_dirs"]
    cache_backend: str = DEFAULT_CONFIG["cache_backend"]
    cache_dir: str = DEFAULT_CONFIG["cache_dir"]

    @classmethod
    def from_mapping(
        cls,
        data: Optional[Mapping[str, Any]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "SitemapConfig":
        """Build a config from *data*, coercing string values where needed.

        Unknown keys are ignored; invalid booleans/integers fall back to the
        defaults with a warning.
        """
        log = logger or get_logger("config")
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            if key not in known:
                log.debug("ignoring unknown config key %r", key)
                continue
            default = DEFAULT_CONFIG[key]
            if isinstance(default, bool):
                kwargs[key] = _as_bool(value, default, key, log)
            elif key == "max_size":
                kwargs[key] = _as_int(value, default, key, log)
            elif key == "cache_duration":
                if isinstance(value, str):
                    value = _as_int(value, default, key, log)
                kwargs[key] = value
            elif key == "template_dirs":
                kwargs[key] = (value,) if isinstance(value, str) else tuple(value or ())
            elif key == "styles_location":
                kwargs[key] = str(value) if value else None
            elif value is not None:
                kwargs[key] = str(value)
        return cls(**kwargs)

    @classmethod
    def load(
        cls,
        *,
        path: str | Path | None = None,
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "SitemapConfig":
        """Resolve defaults → config file → environment → explicit overrides."""
        merged = dict(DEFAULT_CONFIG)
        if path is not None:
            merged = merge_config(merged, load_config_file(path))
        merged = merge_config(merged, config_from_env(environ))
        merged = merge_config(merged, overrides)
        return cls.from_mapping(merged, logger=logger)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


class ConfigRepository(ConfigRepositoryProtocol):
    """Dotted-key view over a :class:`SitemapConfig`.

    Recognised keys:
      • app.url          → SitemapConfig.app_url
      • app.public_path  → SitemapConfig.public_path
      • sitemap.<field>  → any SitemapConfig field
    """

    _APP_KEYS = {"app.url": "app_url", "app.public_path": "public_path"}

    def __init__(self, config: Optional[SitemapConfig] = None) -> None:
        self._cfg = config or SitemapConfig()

    @property
    def config(self) -> SitemapConfig:
        return self._cfg

    def get(self, key: str, default: Any = None) -> Any:
        attr = self._APP_KEYS.get(key)
        if attr is None and key.startswith("sitemap."):
            attr = key.split(".", 1)[1]
        if attr is None:
            return default
        return getattr(self._cfg, attr, default)
