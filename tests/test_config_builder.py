"""Unit tests for building and validating site configuration literals.

These tests cover :func:`docsite_nav.config.build_site_config`: successful
construction round-trips the literal, each invariant maps to its own error
type, and several problems in one literal are reported together.

Usage
-----
Run ``pytest tests/test_config_builder.py -v``. The ``guide_literal`` fixture
from ``conftest.py`` supplies a valid starting literal for each test.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from docsite_nav.config import (
    ConfigValidationError,
    DuplicateSidebarLinkError,
    InvalidNavItemError,
    InvalidSidebarPrefixError,
    MalformedEntryError,
    MissingFieldError,
    SearchProvider,
    SidebarGroup,
    UnknownIconError,
    UnknownSearchProviderError,
    build_site_config,
)

Literal = dict[str, typ.Any]


def _single_error(literal: Literal) -> Exception:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(literal)
    errors = excinfo.value.errors
    assert len(errors) == 1, f"expected exactly one error, got {errors!r}"
    return errors[0]


def test_valid_literal_round_trips(guide_literal: Literal) -> None:
    """A valid literal builds and serialises back to the same structure."""
    site = build_site_config(guide_literal)
    assert site.to_dict() == guide_literal


def test_order_is_preserved(guide_literal: Literal) -> None:
    site = build_site_config(guide_literal)
    assert [item.text for item in site.nav] == ["Home", "Guide", "Packages"]
    assert list(site.sidebar) == ["/guide/", "/guide/advanced/"]
    assert [group.text for group in site.sidebar["/guide/"]] == [
        "Introduction",
        "Core Concepts",
    ]
    assert [link.icon for link in site.social_links] == ["github"]


def test_dropdown_nav_item_needs_no_link(guide_literal: Literal) -> None:
    site = build_site_config(guide_literal)
    packages = site.nav[2]
    assert packages.link is None
    assert packages.is_dropdown
    assert [child.text for child in packages.children] == [
        "firestore_odm",
        "firestore_odm_builder",
    ]


def test_children_alias_for_dropdown(guide_literal: Literal) -> None:
    packages = guide_literal["nav"][2]
    packages["children"] = packages.pop("items")
    site = build_site_config(guide_literal)
    assert len(site.nav[2].children) == 2


def test_model_is_immutable(guide_literal: Literal) -> None:
    site = build_site_config(guide_literal)
    with pytest.raises(dc.FrozenInstanceError):
        site.title = "Other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        site.sidebar["/new/"] = ()  # type: ignore[index]


def test_theme_config_keys_are_lifted(guide_literal: Literal) -> None:
    """VitePress-style ``themeConfig`` nesting yields the same model."""
    nested = {
        "title": guide_literal.pop("title"),
        "description": guide_literal.pop("description"),
        "themeConfig": guide_literal,
    }
    site = build_site_config(nested)
    assert site.title == "Firestore ODM"
    assert len(site.sidebar["/guide/"]) == 2


def test_sidebar_list_applies_to_root_prefix(guide_literal: Literal) -> None:
    guide_literal["sidebar"] = guide_literal["sidebar"]["/guide/"]
    site = build_site_config(guide_literal)
    assert list(site.sidebar) == ["/"]


def test_nested_sidebar_groups(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][1]["items"].append(
        {
            "text": "Identifiers",
            "collapsed": True,
            "items": [{"text": "Document ID", "link": "/guide/document-id"}],
        }
    )
    site = build_site_config(guide_literal)
    nested = site.sidebar["/guide/"][1].items[-1]
    assert isinstance(nested, SidebarGroup)
    assert nested.collapsed is True
    assert site.to_dict() == guide_literal


def test_missing_search_defaults_to_local(guide_literal: Literal) -> None:
    del guide_literal["search"]
    site = build_site_config(guide_literal)
    assert site.search.provider is SearchProvider.LOCAL


def test_unknown_search_provider_names_value(guide_literal: Literal) -> None:
    guide_literal["search"] = {"provider": "remote"}
    error = _single_error(guide_literal)
    assert isinstance(error, UnknownSearchProviderError)
    assert error.provider == "remote"
    assert "remote" in str(error)


def test_external_search_requires_endpoint(guide_literal: Literal) -> None:
    guide_literal["search"] = {"provider": "external"}
    error = _single_error(guide_literal)
    assert isinstance(error, MissingFieldError)
    assert error.field == "endpoint"


def test_external_search_with_endpoint(guide_literal: Literal) -> None:
    guide_literal["search"] = {
        "provider": "external",
        "endpoint": "https://search.example.invalid",
    }
    site = build_site_config(guide_literal)
    assert site.search.provider is SearchProvider.EXTERNAL
    assert site.search.endpoint == "https://search.example.invalid"


@pytest.mark.parametrize("field", ["title", "description"])
def test_site_metadata_required(guide_literal: Literal, field: str) -> None:
    guide_literal[field] = "   "
    error = _single_error(guide_literal)
    assert isinstance(error, MissingFieldError)
    assert error.field == field


def test_nav_item_without_link_or_children(guide_literal: Literal) -> None:
    guide_literal["nav"].append({"text": "Orphan"})
    error = _single_error(guide_literal)
    assert isinstance(error, InvalidNavItemError)
    assert error.location == "nav[3]"


def test_nav_item_with_empty_children(guide_literal: Literal) -> None:
    guide_literal["nav"].append({"text": "Empty", "items": []})
    error = _single_error(guide_literal)
    assert isinstance(error, InvalidNavItemError)


def test_nav_item_requires_text(guide_literal: Literal) -> None:
    guide_literal["nav"][0]["text"] = ""
    error = _single_error(guide_literal)
    assert isinstance(error, MissingFieldError)
    assert error.location == "nav[0]"


def test_dropdown_cannot_nest_further(guide_literal: Literal) -> None:
    guide_literal["nav"][2]["items"][0]["items"] = [{"text": "Deep", "link": "/d"}]
    error = _single_error(guide_literal)
    assert isinstance(error, InvalidNavItemError)
    assert error.location == "nav[2].items[0]"


def test_sidebar_prefix_must_start_with_slash(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["reference/"] = []
    error = _single_error(guide_literal)
    assert isinstance(error, InvalidSidebarPrefixError)
    assert error.prefix == "reference/"


def test_duplicate_sidebar_link_across_groups(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][1]["items"].append(
        {"text": "Intro again", "link": "/guide/introduction"}
    )
    error = _single_error(guide_literal)
    assert isinstance(error, DuplicateSidebarLinkError)
    assert error.link == "/guide/introduction"
    assert error.prefix == "/guide/"
    assert "/guide/introduction" in str(error)


def test_duplicate_detection_ignores_page_suffix(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][0]["items"].append(
        {"text": "Start (html)", "link": "/guide/getting-started.html"}
    )
    error = _single_error(guide_literal)
    assert isinstance(error, DuplicateSidebarLinkError)


def test_same_link_under_other_prefix_is_allowed(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/advanced/"][0]["items"].append(
        {"text": "Data Modeling", "link": "/guide/data-modeling"}
    )
    site = build_site_config(guide_literal)
    assert len(site.sidebar["/guide/advanced/"][0].items) == 3


def test_unknown_social_icon(guide_literal: Literal) -> None:
    guide_literal["socialLinks"].append(
        {"icon": "myspace", "link": "https://myspace.example.invalid"}
    )
    error = _single_error(guide_literal)
    assert isinstance(error, UnknownIconError)
    assert error.icon == "myspace"


def test_sidebar_entry_without_link_or_items(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][0]["items"].append({"text": "Nothing"})
    error = _single_error(guide_literal)
    assert isinstance(error, MalformedEntryError)
    assert error.location == "sidebar['/guide/'][0].items[2]"


def test_non_mapping_literal_is_rejected() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(["not", "a", "mapping"])  # type: ignore[arg-type]
    assert isinstance(excinfo.value.errors[0], MalformedEntryError)


def test_all_problems_are_reported_together(guide_literal: Literal) -> None:
    """Every violated invariant appears in one aggregate error."""
    guide_literal["title"] = ""
    guide_literal["search"] = {"provider": "remote"}
    guide_literal["nav"].append({"text": "Orphan"})
    guide_literal["sidebar"]["guide"] = []
    guide_literal["sidebar"]["/guide/"][1]["items"].append(
        {"text": "Copy", "link": "/guide/data-modeling"}
    )
    guide_literal["socialLinks"][0]["icon"] = "myspace"

    with pytest.raises(ConfigValidationError) as excinfo:
        build_site_config(guide_literal)

    aggregate = excinfo.value
    kinds = {type(error) for error in aggregate.errors}
    assert kinds == {
        MissingFieldError,
        UnknownSearchProviderError,
        InvalidNavItemError,
        InvalidSidebarPrefixError,
        DuplicateSidebarLinkError,
        UnknownIconError,
    }
    assert len(aggregate.of_type(MissingFieldError)) == 1
    assert "6 problems" in str(aggregate)


def test_anchor_links_into_one_page_are_distinct(guide_literal: Literal) -> None:
    """Links differing only by fragment are separate sidebar entries."""
    guide_literal["sidebar"]["/guide/"][0]["items"] = [
        {"text": "Install", "link": "/guide/start#install"},
        {"text": "Usage", "link": "/guide/start#usage"},
    ]
    site = build_site_config(guide_literal)
    assert site.to_dict() == guide_literal


def test_repeated_anchor_link_is_duplicate(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][0]["items"] = [
        {"text": "Install", "link": "/guide/start#install"},
        {"text": "Install again", "link": "/guide/start.md#install"},
    ]
    error = _single_error(guide_literal)
    assert isinstance(error, DuplicateSidebarLinkError)
    assert error.link == "/guide/start.md#install"


def test_linked_group_header_round_trips(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][0]["link"] = "/guide/"
    site = build_site_config(guide_literal)
    assert site.sidebar["/guide/"][0].link == "/guide/"
    assert site.to_dict() == guide_literal


def test_group_header_link_counts_for_duplicates(guide_literal: Literal) -> None:
    guide_literal["sidebar"]["/guide/"][1]["link"] = "/guide/introduction"
    error = _single_error(guide_literal)
    assert isinstance(error, DuplicateSidebarLinkError)
    assert error.location == "sidebar['/guide/'][1]"


def test_dropdown_with_items_and_children(guide_literal: Literal) -> None:
    guide_literal["nav"][2]["children"] = [{"text": "Other", "link": "/other"}]
    error = _single_error(guide_literal)
    assert isinstance(error, MalformedEntryError)
    assert error.location == "nav[2]"
