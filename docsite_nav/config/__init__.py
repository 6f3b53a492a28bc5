"""Build and validate the navigation configuration of a documentation site.

This subpackage turns a VitePress-style configuration literal (site title and
description, search provider, top navigation, per-prefix sidebar tree, and
social links) into frozen dataclasses. :func:`build_site_config` validates a
literal already in memory and :func:`load_site_config` reads one from a YAML or
JSON file. Both either return a complete :class:`SiteConfig` or raise a
:class:`ConfigValidationError` listing every problem found.

Examples
--------
>>> from pathlib import Path
>>> from docsite_nav.config import load_site_config
>>> site = load_site_config(Path("docs/site.yaml"))  # doctest: +SKIP
>>> site.resolve_sidebar("/guide/pagination").prefix  # doctest: +SKIP
'/guide/'
"""

from .builder import build_site_config
from .errors import (
    ConfigValidationError,
    DuplicateSidebarLinkError,
    InvalidNavItemError,
    InvalidSidebarPrefixError,
    MalformedEntryError,
    MissingFieldError,
    SiteConfigError,
    UnknownIconError,
    UnknownSearchProviderError,
)
from .loader import load_site_config
from .models import (
    Breadcrumb,
    NavItem,
    SearchConfig,
    SearchProvider,
    SidebarGroup,
    SidebarLink,
    SidebarResolution,
    SiteConfig,
    SocialLink,
)

__all__ = [
    "Breadcrumb",
    "ConfigValidationError",
    "DuplicateSidebarLinkError",
    "InvalidNavItemError",
    "InvalidSidebarPrefixError",
    "MalformedEntryError",
    "MissingFieldError",
    "NavItem",
    "SearchConfig",
    "SearchProvider",
    "SidebarGroup",
    "SidebarLink",
    "SidebarResolution",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "UnknownIconError",
    "UnknownSearchProviderError",
    "build_site_config",
    "load_site_config",
]
