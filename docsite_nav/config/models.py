"""Typed, immutable dataclasses describing a documentation site's navigation."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    import collections.abc as cabc


class SearchProvider(enum.StrEnum):
    """Search backends a site can select."""

    LOCAL = "local"
    EXTERNAL = "external"


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search provider selection handed to the search collaborator."""

    provider: SearchProvider = SearchProvider.LOCAL
    endpoint: str | None = None

    def to_dict(self) -> dict[str, typ.Any]:
        data: dict[str, typ.Any] = {"provider": self.provider.value}
        if self.endpoint is not None:
            data["endpoint"] = self.endpoint
        return data


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """Top navigation entry, either a link or a dropdown label."""

    text: str
    link: str | None = None
    children: tuple[NavItem, ...] = ()

    @property
    def is_dropdown(self) -> bool:
        """Return ``True`` when the entry only labels a dropdown."""
        return bool(self.children)

    def to_dict(self) -> dict[str, typ.Any]:
        data: dict[str, typ.Any] = {"text": self.text}
        if self.link is not None:
            data["link"] = self.link
        if self.children:
            data["items"] = [child.to_dict() for child in self.children]
        return data


@dc.dataclass(frozen=True, slots=True)
class SidebarLink:
    """A single page entry in the sidebar."""

    text: str
    link: str

    def to_dict(self) -> dict[str, typ.Any]:
        return {"text": self.text, "link": self.link}


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """Named, ordered cluster of sidebar links; groups may nest.

    A group with its own ``link`` is a clickable header and counts as a page
    entry placed before its items.
    """

    text: str
    items: tuple[SidebarLink | SidebarGroup, ...] = ()
    link: str | None = None
    collapsed: bool | None = None

    def iter_links(self) -> cabc.Iterator[SidebarLink | SidebarGroup]:
        """Yield every linked entry of this group depth-first in declared order."""
        if self.link is not None:
            yield self
        for item in self.items:
            if isinstance(item, SidebarGroup):
                yield from item.iter_links()
            else:
                yield item

    def to_dict(self) -> dict[str, typ.Any]:
        data: dict[str, typ.Any] = {"text": self.text}
        if self.link is not None:
            data["link"] = self.link
        data["items"] = [item.to_dict() for item in self.items]
        if self.collapsed is not None:
            data["collapsed"] = self.collapsed
        return data


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """External profile link shown in the site header."""

    icon: str
    link: str

    def to_dict(self) -> dict[str, typ.Any]:
        return {"icon": self.icon, "link": self.link}


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """One step of the trail leading to the active sidebar link."""

    text: str
    link: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "link": self.link}


@dc.dataclass(frozen=True, slots=True)
class SidebarResolution:
    """Sidebar selected for a page path and the position of its active link.

    ``groups`` is empty when no prefix covers the path. ``active_index`` is the
    zero-based position of the active link within :attr:`links`, or ``None``
    when the page has no sidebar entry of its own.
    """

    prefix: str | None = None
    groups: tuple[SidebarGroup, ...] = ()
    active_index: int | None = None

    @property
    def links(self) -> tuple[SidebarLink | SidebarGroup, ...]:
        """Return every linked entry of the selected groups in display order."""
        return tuple(link for group in self.groups for link in group.iter_links())

    @property
    def active_link(self) -> SidebarLink | SidebarGroup | None:
        """Return the active entry, if any; a linked group header may be active."""
        if self.active_index is None:
            return None
        return self.links[self.active_index]

    @property
    def active_group(self) -> SidebarGroup | None:
        """Return the active group header or the innermost group holding the link."""
        active = self.active_link
        if active is None:
            return None
        if isinstance(active, SidebarGroup):
            return active
        return _find_owner(self.groups, active)


def _find_owner(
    groups: cabc.Iterable[SidebarGroup], target: SidebarLink
) -> SidebarGroup | None:
    for group in groups:
        for item in group.items:
            if item is target:
                return group
            if isinstance(item, SidebarGroup):
                owner = _find_owner([item], target)
                if owner is not None:
                    return owner
    return None


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Validated, read-only snapshot of a site's navigation configuration.

    Instances are produced by :func:`docsite_nav.config.build_site_config` and
    are never mutated afterwards, so a single instance can be shared by any
    number of concurrent page renderers.
    """

    title: str
    description: str
    search: SearchConfig
    nav: tuple[NavItem, ...]
    sidebar: typ.Mapping[str, tuple[SidebarGroup, ...]]
    social_links: tuple[SocialLink, ...]

    def resolve_sidebar(self, current_path: str) -> SidebarResolution:
        """Return the sidebar groups and active link index for a page path.

        Parameters
        ----------
        current_path : str
            Site-relative path of the page being rendered, such as
            ``/guide/data-modeling``.

        Returns
        -------
        SidebarResolution
            Groups declared under the longest matching prefix together with
            the active link position. Unmatched paths yield an empty
            resolution rather than an error.

        Examples
        --------
        >>> site = build_site_config(literal)  # doctest: +SKIP
        >>> site.resolve_sidebar("/guide/data-modeling").active_index  # doctest: +SKIP
        2
        """
        from docsite_nav.navigation import resolve_sidebar

        return resolve_sidebar(self.sidebar, current_path)

    def breadcrumb_for(self, current_path: str) -> tuple[Breadcrumb, ...]:
        """Return the breadcrumb trail for a page path.

        The trail holds one crumb per group enclosing the active link, each
        pointing at the owning sidebar prefix, followed by the link itself. It
        is empty when the page has no active sidebar link.
        """
        from docsite_nav.navigation import build_breadcrumb

        return build_breadcrumb(self.sidebar, current_path)

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the configuration literal this snapshot represents."""
        return {
            "title": self.title,
            "description": self.description,
            "search": self.search.to_dict(),
            "nav": [item.to_dict() for item in self.nav],
            "sidebar": {
                prefix: [group.to_dict() for group in groups]
                for prefix, groups in self.sidebar.items()
            },
            "socialLinks": [link.to_dict() for link in self.social_links],
        }


__all__ = [
    "Breadcrumb",
    "NavItem",
    "SearchConfig",
    "SearchProvider",
    "SidebarGroup",
    "SidebarLink",
    "SidebarResolution",
    "SiteConfig",
    "SocialLink",
]
