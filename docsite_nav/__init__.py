"""Typed navigation configuration for documentation sites.

This package validates a site's navigation descriptor (title, search provider,
top navigation, sidebar tree, and social links) and answers the per-page
questions a renderer asks: which sidebar to show and which entry is active.

Exports
-------
- ``build_site_config``: validate a configuration literal.
- ``load_site_config``: read and validate a YAML or JSON file.
- ``app`` / ``main``: the ``sitenav`` command line entry.

Examples
--------
>>> from docsite_nav import build_site_config
>>> site = build_site_config({"title": "Docs", "description": "Site"})
>>> site.resolve_sidebar("/anything").groups
()
"""

from __future__ import annotations

from .cli import app, main
from .config import (
    ConfigValidationError,
    SiteConfig,
    build_site_config,
    load_site_config,
)

__all__ = [
    "ConfigValidationError",
    "SiteConfig",
    "app",
    "build_site_config",
    "load_site_config",
    "main",
]
