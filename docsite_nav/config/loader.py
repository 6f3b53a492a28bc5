"""Load a site navigation configuration file into the typed model."""

from __future__ import annotations

import typing as typ

from loguru import logger
from ruamel.yaml import YAML

from .builder import build_site_config
from .errors import MalformedEntryError

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from pathlib import Path

    from .models import SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML (or JSON) file describing a site's navigation.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file, for example
        ``docs/site.yaml``.

    Returns
    -------
    SiteConfig
        Validated, read-only site configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    MalformedEntryError
        If the top-level document is not a mapping.
    ConfigValidationError
        If the configuration violates one or more invariants.
    YAMLError
        If the content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite_nav.config import load_site_config
    >>> site = load_site_config(Path("docs/site.yaml"))  # doctest: +SKIP
    >>> site.title  # doctest: +SKIP
    'Firestore ODM'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "top-level document must be a mapping"
        raise MalformedEntryError(str(path), msg)

    logger.debug("loaded site configuration from {}", path)
    return build_site_config(loaded)


__all__ = ["load_site_config"]
