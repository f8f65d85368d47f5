"""Unit tests for text report formatting."""

import pytest

from scribe.contexts.assessment import (
    ProficiencyLevel,
    SkillAssessment,
    SkillRecommendations,
    SkillSource,
)
from scribe.contexts.screening import ResumeRecord, analyze
from scribe.utils.report_formatter import (
    Column,
    TableFormatter,
    format_ats_report,
    format_skill_report,
)


class TestTableFormatter:
    """Tests for the line-based table builder."""

    @pytest.mark.unit
    def test_columns_align_and_truncate(self):
        column = Column("Skill", 6)
        assert column.format_header() == "Skill "
        assert column.format_value("Go") == "Go    "
        assert column.format_value("JavaScript") == "JavaS~"
        assert Column("Score", 5, ">").format_value(42) == "   42"

    @pytest.mark.unit
    def test_chained_report(self):
        report = (
            TableFormatter([Column("Name", 6), Column("Score", 5, ">")], total_width=12)
            .add_section_header("TITLE")
            .add_table_header()
            .add_row(["Ada", 90])
            .add_bullets([])
            .render()
        )
        assert report.splitlines() == [
            "=" * 12,
            "TITLE",
            "=" * 12,
            "Name   Score",
            "-" * 12,
            "Ada       90",
            "  (none)",
        ]

    @pytest.mark.unit
    def test_row_width_mismatch(self):
        with pytest.raises(ValueError):
            TableFormatter([Column("Name", 6)]).add_row(["Ada", 90])


@pytest.mark.unit
def test_ats_report_sections():
    report = format_ats_report(analyze(ResumeRecord()), target_role="backend")

    assert "ATS COMPATIBILITY: 31/100 (DOES NOT PASS)" in report
    assert "Target role: backend" in report
    assert "Structure" in report
    assert "  - Missing work experience" in report
    assert "Important keywords missing:" in report
    assert report.rstrip().endswith("Use bullet points and action verbs to improve readability.")


@pytest.mark.unit
def test_skill_report_sections():
    profile = [
        SkillAssessment("JavaScript", ProficiencyLevel.ADVANCED, True, SkillSource.QUIZ, score=85),
        SkillAssessment("Docker", ProficiencyLevel.INTERMEDIATE, False, SkillSource.MANUAL),
    ]
    recommendations = SkillRecommendations(missing=("React",), emerging=("Svelte",), complementary=())

    report = format_skill_report(
        profile, ["JavaScript"], recommendations, proficiency=("Rust", None)
    )

    assert "SKILL PROFILE (2 skills)" in report
    assert "JavaScript" in report and "advanced" in report
    assert "Proficiency in Rust: no assessment" in report
    assert "  - React" in report
    assert "Complementary skills:\n  (none)" in report
