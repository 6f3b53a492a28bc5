"""Exception types raised while validating a site navigation configuration.

Every concrete problem found in a configuration literal is represented by one
:class:`SiteConfigError` subclass carrying the ``location`` of the offending
entry. Validation never stops at the first problem; the individual errors are
gathered into a single :class:`ConfigValidationError` so a build can report the
complete list in one pass.

Examples
--------
>>> from docsite_nav.config.errors import UnknownIconError
>>> str(UnknownIconError("socialLinks[0]", "myspace"))
"socialLinks[0]: unknown social icon 'myspace'"
"""

from __future__ import annotations

import typing as typ


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        self.message = message
        super().__init__(f"{location}: {message}" if location else message)


class MissingFieldError(SiteConfigError):
    """A required text field is absent or empty."""

    def __init__(self, location: str, field: str) -> None:
        self.field = field
        super().__init__(location, f"'{field}' must be a non-empty string")


class MalformedEntryError(SiteConfigError):
    """An entry does not have the shape the configuration expects."""


class UnknownSearchProviderError(SiteConfigError):
    """The search provider is not one of the recognised providers."""

    def __init__(self, location: str, provider: object) -> None:
        self.provider = provider
        super().__init__(location, f"unknown search provider {provider!r}")


class InvalidNavItemError(SiteConfigError):
    """A nav entry has neither a link nor dropdown children."""


class InvalidSidebarPrefixError(SiteConfigError):
    """A sidebar key is not a site path prefix starting with ``/``."""

    def __init__(self, location: str, prefix: object) -> None:
        self.prefix = prefix
        super().__init__(
            location, f"sidebar prefix {prefix!r} must start with '/'"
        )


class DuplicateSidebarLinkError(SiteConfigError):
    """Two sidebar links under the same prefix point at the same page."""

    def __init__(self, location: str, link: str, prefix: str) -> None:
        self.link = link
        self.prefix = prefix
        super().__init__(
            location, f"duplicate sidebar link '{link}' under prefix '{prefix}'"
        )


class UnknownIconError(SiteConfigError):
    """A social link uses an icon outside the known icon set."""

    def __init__(self, location: str, icon: object) -> None:
        self.icon = icon
        super().__init__(location, f"unknown social icon {icon!r}")


class ConfigValidationError(SiteConfigError):
    """Aggregate of every violation found while building a configuration."""

    def __init__(self, errors: typ.Sequence[SiteConfigError]) -> None:
        self.errors: tuple[SiteConfigError, ...] = tuple(errors)
        count = len(self.errors)
        noun = "problem" if count == 1 else "problems"
        lines = [f"site configuration has {count} {noun}:"]
        lines.extend(f"  - {error}" for error in self.errors)
        super().__init__("", "\n".join(lines))

    def of_type(self, kind: type[SiteConfigError]) -> list[SiteConfigError]:
        """Return the collected errors that are instances of ``kind``."""
        return [error for error in self.errors if isinstance(error, kind)]


__all__ = [
    "ConfigValidationError",
    "DuplicateSidebarLinkError",
    "InvalidNavItemError",
    "InvalidSidebarPrefixError",
    "MalformedEntryError",
    "MissingFieldError",
    "SiteConfigError",
    "UnknownIconError",
    "UnknownSearchProviderError",
]
