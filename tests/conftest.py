"""Shared fixtures for the navigation configuration tests."""

from __future__ import annotations

import copy
import typing as typ
from pathlib import Path

import pytest

SITE_CONFIG_PATH = Path(__file__).resolve().parents[1] / "docs" / "site.yaml"

GUIDE_LITERAL: dict[str, typ.Any] = {
    "title": "Firestore ODM",
    "description": "A type-safe ODM for Firestore on Dart & Flutter",
    "search": {"provider": "local"},
    "nav": [
        {"text": "Home", "link": "/"},
        {"text": "Guide", "link": "/guide/introduction"},
        {
            "text": "Packages",
            "items": [
                {
                    "text": "firestore_odm",
                    "link": "https://pub.dev/packages/firestore_odm",
                },
                {
                    "text": "firestore_odm_builder",
                    "link": "https://pub.dev/packages/firestore_odm_builder",
                },
            ],
        },
    ],
    "sidebar": {
        "/guide/": [
            {
                "text": "Introduction",
                "items": [
                    {"text": "What is Firestore ODM?", "link": "/guide/introduction"},
                    {"text": "Getting Started", "link": "/guide/getting-started"},
                ],
            },
            {
                "text": "Core Concepts",
                "items": [
                    {"text": "Data Modeling", "link": "/guide/data-modeling"},
                    {"text": "Schema Definition", "link": "/guide/schema-definition"},
                ],
            },
        ],
        "/guide/advanced/": [
            {
                "text": "Advanced Features",
                "items": [
                    {"text": "Transactions", "link": "/guide/advanced/transactions"},
                    {"text": "Aggregations", "link": "/guide/advanced/aggregations"},
                ],
            }
        ],
    },
    "socialLinks": [
        {"icon": "github", "link": "https://github.com/sylphxltd/firestore_odm"}
    ],
}


@pytest.fixture
def guide_literal() -> dict[str, typ.Any]:
    """Return a fresh copy of a valid configuration literal."""
    return copy.deepcopy(GUIDE_LITERAL)


@pytest.fixture
def site_config_path() -> Path:
    """Return the path of the sample site configuration shipped in ``docs``."""
    return SITE_CONFIG_PATH
