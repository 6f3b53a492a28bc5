"""Cyclopts CLI entrypoint for checking a documentation site's navigation config.

The ``sitenav`` console script loads the site configuration file, reports every
validation problem in one pass, and shows how a given page path resolves
against the sidebar tree. It is meant to be run locally or in CI before the
site build so navigation mistakes fail fast with a readable listing.

Examples
--------
Validate the default configuration:

>>> from docsite_nav.cli import main
>>> main()  # doctest: +SKIP

Show the sidebar and breadcrumb for one page:

>>> from docsite_nav.cli import app
>>> app(["resolve", "/guide/pagination"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from loguru import logger

from ._constants import DEFAULT_CONFIG
from .config import (
    ConfigValidationError,
    SiteConfig,
    SiteConfigError,
    load_site_config,
)
from .logging_config import configure_logging

app = App(name="sitenav", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _load_or_exit(config: Path) -> SiteConfig:
    """Load ``config`` or log each validation problem and exit with status 1."""
    try:
        return load_site_config(config)
    except SiteConfigError as exc:
        errors = exc.errors if isinstance(exc, ConfigValidationError) else (exc,)
        for error in errors:
            logger.error("{}", error)
        logger.error("{} invalid: {} problem(s)", config, len(errors))
        raise SystemExit(1) from exc


@app.command(help="Validate the site navigation configuration.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug detail", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Validate the configuration file and print a short summary.

    Parameters
    ----------
    config : Path, optional
        Path to the site configuration file (overridable via
        ``INPUT_CONFIG``).
    verbose : bool, optional
        Emit debug logging while loading.

    Returns
    -------
    None
        Prints the summary to stdout.

    Raises
    ------
    SystemExit
        With status 1 when the configuration has validation problems.
    """
    configure_logging(verbose=verbose)
    site = _load_or_exit(config)
    print(f"{site.title}: {site.description}")
    print(f"search: {site.search.provider.value}")
    print(f"nav: {len(site.nav)} item(s)")
    for prefix, groups in site.sidebar.items():
        count = sum(1 for group in groups for _ in group.iter_links())
        print(f"sidebar {prefix}: {len(groups)} group(s), {count} link(s)")
    icons = ", ".join(link.icon for link in site.social_links) or "none"
    print(f"social: {icons}")


@app.command(help="Show the sidebar and breadcrumb resolved for a page path.")
def resolve(
    page_path: typ.Annotated[str, Parameter(help="Site-relative page path")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[
        bool, Parameter(help="Log debug detail", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Print the sidebar prefix, active link and breadcrumb for ``page_path``."""
    configure_logging(verbose=verbose)
    site = _load_or_exit(config)
    resolution = site.resolve_sidebar(page_path)
    if resolution.prefix is None:
        print(f"{page_path}: no sidebar")
        return
    print(f"{page_path}: sidebar {resolution.prefix}")
    active = resolution.active_link
    if active is None:
        print("active: none")
        return
    print(f"active: [{resolution.active_index}] {active.text}")
    trail = " > ".join(crumb.text for crumb in site.breadcrumb_for(page_path))
    print(f"breadcrumb: {trail}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `sitenav` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
