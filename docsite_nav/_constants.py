"""Common literal values used across docsite_nav.

These constants keep the recognised icon identifiers and default paths in one
place so the validator, CLI, and tests agree on them.

Examples
--------
>>> from docsite_nav import _constants
>>> "github" in _constants.KNOWN_ICONS
True
>>> _constants.ROOT_PREFIX
'/'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("docs/site.yaml")

ROOT_PREFIX = "/"

KNOWN_ICONS: frozenset[str] = frozenset(
    {
        "discord",
        "facebook",
        "github",
        "instagram",
        "linkedin",
        "mastodon",
        "npm",
        "slack",
        "twitter",
        "x",
        "youtube",
    }
)

# Suffixes a page link may carry that still identify the same rendered page.
PAGE_SUFFIXES: tuple[str, ...] = (".html", ".md")
