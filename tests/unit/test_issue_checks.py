"""Unit tests for concrete formatting and structure issue detection."""

import pytest

from scribe.contexts.screening import ExperienceEntry, ResumeRecord
from scribe.contexts.screening.issue_checks import check_formatting, check_structure


@pytest.mark.unit
def test_clean_contact_details_have_no_formatting_issues():
    resume = ResumeRecord(name="Ada Lovelace", email="ada@example.com", phone="+1 555 123 4567")
    assert check_formatting(resume) == []


@pytest.mark.unit
def test_formatting_issues_in_fixed_order():
    """Email, then phone, then special characters."""
    resume = ResumeRecord(name="Ada & co", email="bad-email", phone="12")
    assert check_formatting(resume) == [
        "Invalid email format",
        "Phone number format may not be ATS-friendly",
        "Contains special characters that may confuse ATS systems",
    ]


@pytest.mark.unit
def test_empty_resume_structure_issues():
    assert check_structure(ResumeRecord()) == [
        "Missing full name",
        "Missing professional summary",
        "Missing skills section",
        "Missing work experience",
    ]


@pytest.mark.unit
def test_experience_entries_numbered_from_one():
    """Per-entry issues name the entry by its 1-based position."""
    resume = ResumeRecord(
        name="Ada",
        summary="Engineer",
        skills="Python",
        experience=(
            ExperienceEntry(role="Dev", company="Acme", description="Work"),
            ExperienceEntry(role="", company="Initech", description=" "),
        ),
    )
    assert check_structure(resume) == [
        "Experience 2: Missing job title",
        "Experience 2: Missing job description",
    ]
