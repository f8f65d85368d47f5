"""Unit tests for target role resolution."""

import pytest

from scribe.contexts.taxonomy import resolve_role, role_entries
from scribe.contexts.taxonomy.tables import ATS_ROLE_KEYWORDS, ROLE_REQUIREMENTS


@pytest.mark.unit
def test_substring_match_ignores_case():
    """Role keys match anywhere inside the target role, in any case."""
    assert resolve_role("Senior FRONTEND Engineer", ATS_ROLE_KEYWORDS) == "frontend"
    assert resolve_role("Lead Data Scientist", ATS_ROLE_KEYWORDS) == "data"


@pytest.mark.unit
def test_first_key_in_declaration_order_wins():
    """When several keys match, the earliest declared key is chosen."""
    table = {"backend": ("a",), "data": ("b",)}
    assert resolve_role("data platform backend engineer", table) == "backend"

    reordered = {"data": ("b",), "backend": ("a",)}
    assert resolve_role("data platform backend engineer", reordered) == "data"


@pytest.mark.unit
@pytest.mark.parametrize("role", [None, "", "Chef", "full-stack"])
def test_no_match_returns_none(role):
    """Empty or unrecognised roles resolve to nothing."""
    assert resolve_role(role, ATS_ROLE_KEYWORDS) is None


@pytest.mark.unit
def test_role_entries_keep_declared_order():
    """Entries for the matched role come back in table order."""
    assert role_entries("Frontend Developer", ROLE_REQUIREMENTS) == (
        "JavaScript", "React", "HTML/CSS", "Responsive Design", "Git", "REST APIs",
    )


@pytest.mark.unit
def test_role_entries_empty_for_unknown_role():
    """Unknown roles contribute no entries."""
    assert role_entries("Astronaut", ROLE_REQUIREMENTS) == ()
    assert role_entries(None, ROLE_REQUIREMENTS) == ()


@pytest.mark.unit
def test_requirement_keys_need_the_full_phrase():
    """Requirement keys are multi-word, so a bare 'frontend' does not match them."""
    assert resolve_role("Senior Frontend Engineer", ROLE_REQUIREMENTS) is None
    assert resolve_role("Senior Frontend Developer", ROLE_REQUIREMENTS) == "frontend developer"
