"""Utility helpers shared by the configuration builder."""

from __future__ import annotations

import typing as typ

from .._constants import PAGE_SUFFIXES
from .errors import MalformedEntryError, MissingFieldError, SiteConfigError


class IssueLog:
    """Collect validation problems so every one of them can be reported."""

    def __init__(self) -> None:
        self.errors: list[SiteConfigError] = []

    def add(self, error: SiteConfigError) -> None:
        self.errors.append(error)

    def __bool__(self) -> bool:
        return bool(self.errors)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _required_str(
    payload: typ.Mapping[str, typ.Any], key: str, location: str, issues: IssueLog
) -> str:
    """Return ``payload[key]`` as text, logging a problem when it is empty."""
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value
    issues.add(MissingFieldError(location, key))
    return ""


def _as_list(
    value: object, location: str, issues: IssueLog, *, what: str
) -> list[typ.Any]:
    """Return ``value`` as a list, treating ``None`` as empty."""
    match value:
        case None:
            return []
        case list() | tuple():
            return list(value)
        case _:
            issues.add(MalformedEntryError(location, f"{what} must be a list"))
            return []


def _optional_bool(
    value: object, location: str, issues: IssueLog, *, what: str
) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    issues.add(MalformedEntryError(location, f"{what} must be true or false"))
    return None


def normalize_link(link: str) -> str:
    """Strip the fragment, query, and page suffix from a site link.

    Examples
    --------
    >>> normalize_link("/guide/pagination.html#cursors")
    '/guide/pagination'
    >>> normalize_link("/guide/")
    '/guide/'
    """
    text = link.split("#", 1)[0].split("?", 1)[0]
    for suffix in PAGE_SUFFIXES:
        if text.endswith(suffix):
            return text[: -len(suffix)]
    return text


def link_identity(link: str) -> str:
    """Return the key that makes two sidebar links the same entry.

    Only the page suffix is dropped; a fragment or query keeps links apart, so
    several anchors into one page may be listed side by side.

    Examples
    --------
    >>> link_identity("/guide/start.md#install")
    '/guide/start#install'
    >>> link_identity("/guide/start.html") == link_identity("/guide/start")
    True
    """
    cut = min(
        (index for index in (link.find("?"), link.find("#")) if index != -1),
        default=len(link),
    )
    path, tail = link[:cut], link[cut:]
    for suffix in PAGE_SUFFIXES:
        if path.endswith(suffix):
            return path[: -len(suffix)] + tail
    return link


def _index_location(parent: str, index: int) -> str:
    return f"{parent}[{index}]"


def _key_location(parent: str, key: object) -> str:
    return f"{parent}[{key!r}]"


__all__ = [
    "IssueLog",
    "_as_list",
    "_index_location",
    "_key_location",
    "_optional_bool",
    "_optional_str",
    "_required_str",
    "link_identity",
    "normalize_link",
]
