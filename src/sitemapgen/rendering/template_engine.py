"""
template_engine – Jinja2-backed TemplateEngineProtocol implementation.

Templates are looked up as ``<name>.j2``: first in user-supplied
directories (overrides / custom formats), then in the bundled
``sitemapgen/templates`` package directory.

Autoescaping is off because record text is escaped once at admission.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from sitemapgen.core.interfaces.templating import TemplateEngineProtocol
from sitemapgen.logging.helpers import get_logger

TEMPLATE_SUFFIX = '.j2'


class JinjaTemplateEngine(TemplateEngineProtocol):
    def __init__(
        self,
        *,
        template_dirs: Sequence[str | Path] = (),
        suffix: str = TEMPLATE_SUFFIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        loaders: list[BaseLoader] = []
        if template_dirs:
            loaders.append(FileSystemLoader([str(d) for d in template_dirs]))
        loaders.append(PackageLoader('sitemapgen', 'templates'))
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self._suffix = suffix
        self._log = logger or get_logger('templates')

    @property
    def environment(self) -> Environment:
        return self._env

    def render(self, template_name: str, data: Mapping[str, Any]) -> str:
        """Render ``<template_name><suffix>`` with *data*.

        ``jinja2.TemplateNotFound`` propagates for unknown names.
        """
        template = self._env.get_template(f'{template_name}{self._suffix}')
        self._log.debug('rendering template %s', template.name)
        return template.render(**data)
