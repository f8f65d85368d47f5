"""Shared fixtures for SCRIBE tests."""

from pathlib import Path

import pytest

from scribe.contexts.taxonomy import build_taxonomy, set_taxonomy

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding resume and signal fixture files."""
    return FIXTURES_PATH


@pytest.fixture(autouse=True)
def builtin_taxonomy():
    """Run every test against the built-in tables and restore them afterwards."""
    taxonomy = build_taxonomy()
    set_taxonomy(taxonomy)
    yield taxonomy
    set_taxonomy(build_taxonomy())
