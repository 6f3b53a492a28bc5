"""Build a validated :class:`SiteConfig` from a configuration literal.

The literal mirrors a VitePress ``defineConfig`` object: ``title`` and
``description`` at the top level, with ``search``, ``nav``, ``sidebar`` and
``socialLinks`` either alongside them or nested under ``themeConfig``. Every
entry is checked and every problem is recorded; only when the whole literal is
clean is a :class:`SiteConfig` returned, otherwise a single
:class:`ConfigValidationError` lists everything that needs fixing.
"""

from __future__ import annotations

import collections.abc as cabc
import types
import typing as typ

from loguru import logger

from .._constants import KNOWN_ICONS, ROOT_PREFIX
from .errors import (
    ConfigValidationError,
    DuplicateSidebarLinkError,
    InvalidNavItemError,
    InvalidSidebarPrefixError,
    MalformedEntryError,
    MissingFieldError,
    UnknownIconError,
    UnknownSearchProviderError,
)
from .helpers import (
    IssueLog,
    _as_list,
    _index_location,
    _key_location,
    _optional_bool,
    _optional_str,
    _required_str,
    link_identity,
)
from .models import (
    NavItem,
    SearchConfig,
    SearchProvider,
    SidebarGroup,
    SidebarLink,
    SiteConfig,
    SocialLink,
)


def build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate a configuration literal and return the immutable site model.

    Parameters
    ----------
    payload : Mapping[str, Any]
        Configuration literal with ``title``, ``description``, ``search``,
        ``nav``, ``sidebar`` and ``socialLinks`` keys. The last four may be
        nested under ``themeConfig``.

    Returns
    -------
    SiteConfig
        Fully validated, read-only configuration.

    Raises
    ------
    ConfigValidationError
        If any invariant is violated. The exception's ``errors`` attribute
        holds one entry per problem, in the order they were found.

    Examples
    --------
    >>> site = build_site_config(
    ...     {"title": "Docs", "description": "Site", "search": {"provider": "local"}}
    ... )
    >>> site.search.provider.value
    'local'
    """
    issues = IssueLog()
    if not isinstance(payload, cabc.Mapping):
        issues.add(MalformedEntryError("", "configuration must be a mapping"))
        raise ConfigValidationError(issues.errors)

    data = _flatten_theme_config(payload, issues)
    title = _required_str(data, "title", "site", issues)
    description = _required_str(data, "description", "site", issues)
    search = _build_search(data.get("search"), issues)
    nav = _build_nav(data.get("nav"), issues)
    sidebar = _build_sidebar(data.get("sidebar"), issues)
    social_links = _build_social_links(data.get("socialLinks"), issues)

    if issues:
        raise ConfigValidationError(issues.errors)

    logger.debug(
        "built site config {!r}: {} nav items, {} sidebar prefixes",
        title,
        len(nav),
        len(sidebar),
    )
    return SiteConfig(
        title=title,
        description=description,
        search=search,
        nav=nav,
        sidebar=types.MappingProxyType(sidebar),
        social_links=social_links,
    )


def _flatten_theme_config(
    payload: typ.Mapping[str, typ.Any], issues: IssueLog
) -> dict[str, typ.Any]:
    """Lift ``themeConfig`` keys to the top level; explicit top-level keys win."""
    data = {key: value for key, value in payload.items() if key != "themeConfig"}
    match payload.get("themeConfig"):
        case None:
            return data
        case cabc.Mapping() as theme:
            return {**theme, **data}
        case _:
            issues.add(
                MalformedEntryError("themeConfig", "themeConfig must be a mapping")
            )
            return data


def _build_search(payload: object, issues: IssueLog) -> SearchConfig:
    """Build the search selection, defaulting to the local provider."""
    match payload:
        case None:
            return SearchConfig()
        case cabc.Mapping():
            pass
        case _:
            issues.add(MalformedEntryError("search", "search must be a mapping"))
            return SearchConfig()

    raw_provider = payload.get("provider", SearchProvider.LOCAL.value)
    try:
        provider = SearchProvider(raw_provider)
    except ValueError:
        issues.add(UnknownSearchProviderError("search.provider", raw_provider))
        return SearchConfig()

    endpoint = _optional_str(payload.get("endpoint"))
    if provider is SearchProvider.EXTERNAL and endpoint is None:
        issues.add(MissingFieldError("search", "endpoint"))
    return SearchConfig(provider=provider, endpoint=endpoint)


def _build_nav(payload: object, issues: IssueLog) -> tuple[NavItem, ...]:
    """Build the ordered top navigation entries."""
    items: list[NavItem] = []
    for index, entry in enumerate(_as_list(payload, "nav", issues, what="nav")):
        item = _build_nav_item(entry, _index_location("nav", index), issues)
        if item is not None:
            items.append(item)
    return tuple(items)


def _build_nav_item(
    entry: object, location: str, issues: IssueLog, *, nested: bool = False
) -> NavItem | None:
    """Build one nav entry; dropdown children are built with ``nested=True``."""
    if not isinstance(entry, cabc.Mapping):
        issues.add(MalformedEntryError(location, "nav entries must be mappings"))
        return None

    text = _required_str(entry, "text", location, issues)
    link = _optional_str(entry.get("link"))
    if "items" in entry and "children" in entry:
        msg = "use either 'items' or 'children' for dropdown entries, not both"
        issues.add(MalformedEntryError(location, msg))
    raw_children = entry["items"] if "items" in entry else entry.get("children")
    children_location = f"{location}.items"
    children: list[NavItem] = []
    for index, child in enumerate(
        _as_list(raw_children, children_location, issues, what="dropdown items")
    ):
        built = _build_nav_item(
            child, _index_location(children_location, index), issues, nested=True
        )
        if built is not None:
            children.append(built)

    if nested and raw_children:
        msg = "dropdown entries cannot contain further dropdowns"
        issues.add(InvalidNavItemError(location, msg))
    elif link is None and not raw_children:
        msg = "nav item needs a 'link' or non-empty dropdown 'items'"
        issues.add(InvalidNavItemError(location, msg))
    return NavItem(text=text, link=link, children=tuple(children))


def _build_sidebar(
    payload: object, issues: IssueLog
) -> dict[str, tuple[SidebarGroup, ...]]:
    """Build sidebar groups keyed by path prefix.

    A plain list of groups applies to every page and is stored under ``/``.
    """
    match payload:
        case None:
            return {}
        case list() | tuple():
            entries: list[tuple[object, object]] = [(ROOT_PREFIX, payload)]
        case cabc.Mapping():
            entries = list(payload.items())
        case _:
            msg = "sidebar must be a mapping of path prefixes or a list of groups"
            issues.add(MalformedEntryError("sidebar", msg))
            return {}

    sidebar: dict[str, tuple[SidebarGroup, ...]] = {}
    for prefix, raw_groups in entries:
        location = _key_location("sidebar", prefix)
        valid_prefix = isinstance(prefix, str) and prefix.startswith(ROOT_PREFIX)
        if not valid_prefix:
            issues.add(InvalidSidebarPrefixError("sidebar", prefix))
        groups = _build_sidebar_groups(
            raw_groups, location, str(prefix), issues, seen={}
        )
        if valid_prefix:
            sidebar[typ.cast("str", prefix)] = groups
    return sidebar


def _build_sidebar_groups(
    payload: object,
    location: str,
    prefix: str,
    issues: IssueLog,
    *,
    seen: dict[str, str],
) -> tuple[SidebarGroup, ...]:
    groups: list[SidebarGroup] = []
    for index, entry in enumerate(
        _as_list(payload, location, issues, what="sidebar groups")
    ):
        entry_location = _index_location(location, index)
        if not isinstance(entry, cabc.Mapping) or "items" not in entry:
            msg = "top-level sidebar entries must be groups with 'items'"
            issues.add(MalformedEntryError(entry_location, msg))
            continue
        groups.append(
            _build_sidebar_group(entry, entry_location, prefix, issues, seen=seen)
        )
    return tuple(groups)


def _build_sidebar_group(
    entry: typ.Mapping[str, typ.Any],
    location: str,
    prefix: str,
    issues: IssueLog,
    *,
    seen: dict[str, str],
) -> SidebarGroup:
    text = _required_str(entry, "text", location, issues)
    link = _optional_str(entry.get("link"))
    if link is not None:
        _register_link(link, location, prefix, issues, seen=seen)
    collapsed = _optional_bool(
        entry.get("collapsed"), location, issues, what="collapsed"
    )
    items_location = f"{location}.items"
    items: list[SidebarLink | SidebarGroup] = []
    for index, item in enumerate(
        _as_list(entry.get("items"), items_location, issues, what="sidebar items")
    ):
        item_location = _index_location(items_location, index)
        match item:
            case cabc.Mapping() if "items" in item:
                items.append(
                    _build_sidebar_group(
                        item, item_location, prefix, issues, seen=seen
                    )
                )
            case cabc.Mapping() if "link" in item:
                sidebar_link = _build_sidebar_link(
                    item, item_location, prefix, issues, seen=seen
                )
                if sidebar_link is not None:
                    items.append(sidebar_link)
            case _:
                msg = "sidebar entries need a 'link' or nested 'items'"
                issues.add(MalformedEntryError(item_location, msg))
    return SidebarGroup(
        text=text, items=tuple(items), link=link, collapsed=collapsed
    )


def _build_sidebar_link(
    entry: typ.Mapping[str, typ.Any],
    location: str,
    prefix: str,
    issues: IssueLog,
    *,
    seen: dict[str, str],
) -> SidebarLink | None:
    """Build a sidebar link and record duplicates within the current prefix."""
    text = _required_str(entry, "text", location, issues)
    link = _required_str(entry, "link", location, issues)
    if not link:
        return None
    _register_link(link, location, prefix, issues, seen=seen)
    return SidebarLink(text=text, link=link)


def _register_link(
    link: str,
    location: str,
    prefix: str,
    issues: IssueLog,
    *,
    seen: dict[str, str],
) -> None:
    """Record ``link`` for its prefix, reporting it when already listed."""
    key = link_identity(link)
    if key in seen:
        issues.add(DuplicateSidebarLinkError(location, link, prefix))
    else:
        seen[key] = location


def _build_social_links(payload: object, issues: IssueLog) -> tuple[SocialLink, ...]:
    links: list[SocialLink] = []
    for index, entry in enumerate(
        _as_list(payload, "socialLinks", issues, what="socialLinks")
    ):
        location = _index_location("socialLinks", index)
        if not isinstance(entry, cabc.Mapping):
            issues.add(MalformedEntryError(location, "social links must be mappings"))
            continue
        icon = entry.get("icon")
        if not isinstance(icon, str) or icon not in KNOWN_ICONS:
            issues.add(UnknownIconError(location, icon))
        link = _required_str(entry, "link", location, issues)
        links.append(SocialLink(icon=str(icon), link=link))
    return tuple(links)


__all__ = ["build_site_config"]
