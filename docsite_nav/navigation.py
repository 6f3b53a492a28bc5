"""Resolve the sidebar and breadcrumb trail for a rendered page.

The renderer asks two questions per page: which sidebar should be shown, and
which entry in it is the page itself. The sidebar is chosen by longest prefix
match over the declared sidebar keys, then the links of the chosen groups are
flattened depth-first so the active entry can be reported as a single index.

Both operations are pure: they read the immutable sidebar mapping, never raise
for unknown paths, and return equal results for equal inputs.

Examples
--------
>>> from docsite_nav.config import SidebarGroup, SidebarLink
>>> modeling = SidebarLink("Data Modeling", "/guide/data-modeling")
>>> sidebar = {"/guide/": (SidebarGroup("Core Concepts", (modeling,)),)}
>>> resolve_sidebar(sidebar, "/guide/data-modeling").active_index
0
>>> [crumb.text for crumb in build_breadcrumb(sidebar, "/guide/data-modeling")]
['Core Concepts', 'Data Modeling']
"""

from __future__ import annotations

import typing as typ

from loguru import logger

from .config.helpers import normalize_link
from .config.models import Breadcrumb, SidebarGroup, SidebarLink, SidebarResolution

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc

Sidebar = typ.Mapping[str, typ.Sequence[SidebarGroup]]
SidebarEntry = SidebarLink | SidebarGroup


def select_prefix(sidebar: Sidebar, current_path: str) -> str | None:
    """Return the longest sidebar prefix covering ``current_path``."""
    matches = [prefix for prefix in sidebar if current_path.startswith(prefix)]
    if not matches:
        return None
    return max(matches, key=len)


def walk_links(
    groups: cabc.Iterable[SidebarGroup],
) -> cabc.Iterator[tuple[tuple[SidebarGroup, ...], SidebarEntry]]:
    """Yield ``(ancestors, entry)`` pairs depth-first in declared order.

    ``ancestors`` lists the enclosing groups from the outermost inwards. A group
    with its own link is yielded before its items, with its parents as
    ancestors.
    """
    for group in groups:
        yield from _walk_group(group, ())


def _walk_group(
    group: SidebarGroup, parents: tuple[SidebarGroup, ...]
) -> cabc.Iterator[tuple[tuple[SidebarGroup, ...], SidebarEntry]]:
    if group.link is not None:
        yield parents, group
    chain = (*parents, group)
    for item in group.items:
        match item:
            case SidebarGroup():
                yield from _walk_group(item, chain)
            case SidebarLink():
                yield chain, item


def _find_active(
    groups: cabc.Sequence[SidebarGroup], current_path: str
) -> tuple[int, tuple[SidebarGroup, ...], SidebarEntry] | None:
    target = normalize_link(current_path)
    for index, (ancestors, link) in enumerate(walk_links(groups)):
        if normalize_link(link.link) == target:
            return index, ancestors, link
    return None


def resolve_sidebar(sidebar: Sidebar, current_path: str) -> SidebarResolution:
    """Select the sidebar for ``current_path`` and locate its active link.

    Parameters
    ----------
    sidebar : Mapping[str, Sequence[SidebarGroup]]
        Sidebar groups keyed by path prefix.
    current_path : str
        Site-relative path of the page being rendered.

    Returns
    -------
    SidebarResolution
        The selected prefix and groups plus the zero-based index of the active
        link within the flattened links, or an empty resolution when no prefix
        covers the path.
    """
    if not current_path:
        return SidebarResolution()
    prefix = select_prefix(sidebar, current_path)
    if prefix is None:
        logger.debug("no sidebar prefix covers {}", current_path)
        return SidebarResolution()
    groups = tuple(sidebar[prefix])
    found = _find_active(groups, current_path)
    active_index = found[0] if found else None
    logger.debug(
        "resolved {} to sidebar {!r} (active index {})",
        current_path,
        prefix,
        active_index,
    )
    return SidebarResolution(prefix=prefix, groups=groups, active_index=active_index)


def build_breadcrumb(sidebar: Sidebar, current_path: str) -> tuple[Breadcrumb, ...]:
    """Return the breadcrumb trail leading to the active link of a page.

    Each enclosing group contributes a crumb pointing at the owning prefix,
    followed by the active link itself. Pages without an active sidebar link
    get an empty trail.
    """
    if not current_path:
        return ()
    prefix = select_prefix(sidebar, current_path)
    if prefix is None:
        return ()
    found = _find_active(tuple(sidebar[prefix]), current_path)
    if found is None:
        return ()
    _, ancestors, link = found
    trail = [Breadcrumb(text=group.text, link=prefix) for group in ancestors]
    trail.append(Breadcrumb(text=link.text, link=link.link))
    return tuple(trail)


__all__ = [
    "build_breadcrumb",
    "normalize_link",
    "resolve_sidebar",
    "select_prefix",
    "walk_links",
]
