"""
Fixed-width text reports for ATS analyses and skill profiles.

TableFormatter accumulates lines with a chainable API; format_ats_report() and
format_skill_report() build the two reports the scripts print.
"""

from typing import Any, List, Optional, Sequence

from scribe.contexts.assessment import ProficiencyLevel, SkillAssessment, SkillRecommendations
from scribe.contexts.screening import ATSAnalysis

REPORT_WIDTH = 80


class Column:
    """Column definition: header, width, and alignment ('<', '>', '^')."""

    def __init__(self, name: str, width: int, align: str = "<"):
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        """Format a cell, truncating text that would overflow the column."""
        text = str(value)
        if len(text) > self.width:
            text = text[: self.width - 1] + "~"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for text reports made of section headers, aligned rows, and free text."""

    def __init__(self, columns: Optional[List[Column]] = None, total_width: int = REPORT_WIDTH):
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add a title framed by '=' rules."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def use_columns(self, columns: List[Column]) -> "TableFormatter":
        """Switch column layout for the next table in the same report."""
        self.columns = columns
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self.add_separator()

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: Sequence[Any]) -> "TableFormatter":
        """
        Add one data row.

        Raises:
            ValueError: If the number of values doesn't match the columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(" ".join(col.format_value(v) for col, v in zip(self.columns, values)).rstrip())
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def add_bullets(self, items: Sequence[str], empty: str = "(none)") -> "TableFormatter":
        """Add one '- item' line per item, or the empty placeholder."""
        if not items:
            self.lines.append(f"  {empty}")
        for item in items:
            self.lines.append(f"  - {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


# =============================================================================
# ATS REPORT
# =============================================================================


def format_ats_report(analysis: ATSAnalysis, target_role: Optional[str] = None) -> str:
    """
    Render an ATSAnalysis as a text report.

    Sections: overall verdict, sub-score table, suggestions, keyword coverage,
    detected issues, recommendations.

    Args:
        analysis: Result of analyze()
        target_role: Role the resume was scored against, shown in the header

    Returns:
        Multi-line report string
    """
    score = analysis.score
    breakdown = score.breakdown
    verdict = "PASSES" if score.passes_ats else "DOES NOT PASS"

    formatter = TableFormatter(columns=[Column("Category", 20), Column("Score", 8, ">")])
    formatter.add_section_header(f"ATS COMPATIBILITY: {score.overall}/100 ({verdict})")
    if target_role:
        formatter.add_text(f"Target role: {target_role}")
    formatter.add_blank_line()

    formatter.add_table_header()
    for category in ("formatting", "keywords", "structure", "readability", "length"):
        formatter.add_row([category.capitalize(), getattr(breakdown, category)])
    formatter.add_blank_line()

    if score.suggestions:
        formatter.use_columns([Column("Severity", 12), Column("Impact", 7, ">"), Column("Suggestion", 58)])
        formatter.add_table_header()
        for suggestion in score.suggestions:
            formatter.add_row([suggestion.severity.value, f"+{suggestion.impact}", suggestion.title])
        formatter.add_blank_line()

    found = [k for k in analysis.keywords if k.found]
    formatter.add_text(f"Keywords found ({len(found)}/{len(analysis.keywords)}):")
    formatter.add_text("  " + (", ".join(k.keyword for k in found) or "(none)"))
    formatter.add_text("Important keywords missing:")
    formatter.add_text("  " + (", ".join(analysis.get_missing_keywords(min_importance=3)) or "(none)"))
    formatter.add_blank_line()

    formatter.add_text("Issues:")
    formatter.add_bullets(list(analysis.format_issues) + list(analysis.structure_issues))
    formatter.add_blank_line()

    formatter.add_text("Recommendations:")
    formatter.add_bullets(analysis.recommendations)

    return formatter.render()


# =============================================================================
# SKILL REPORT
# =============================================================================


def format_skill_report(
    profile: Sequence[SkillAssessment],
    suggestions: Sequence[str],
    recommendations: SkillRecommendations,
    proficiency: Optional[tuple] = None,
) -> str:
    """
    Render a deduplicated skill profile with resume suggestions and gaps.

    Args:
        profile: Deduplicated assessments, highest level first
        suggestions: Skill names suggested for the resume
        recommendations: Gap analysis
        proficiency: Optional (skill, level or None) pair for a queried skill

    Returns:
        Multi-line report string
    """
    formatter = TableFormatter(
        columns=[
            Column("Skill", 34),
            Column("Level", 13),
            Column("Source", 8),
            Column("Verified", 9),
            Column("Score", 6, ">"),
        ]
    )
    formatter.add_section_header(f"SKILL PROFILE ({len(profile)} skills)")
    formatter.add_table_header()
    for assessment in profile:
        formatter.add_row(
            [
                assessment.skill,
                assessment.level.value,
                assessment.source.value,
                "yes" if assessment.verified else "no",
                "" if assessment.score is None else assessment.score,
            ]
        )
    formatter.add_blank_line()

    if proficiency is not None:
        skill, level = proficiency
        shown = level.value if isinstance(level, ProficiencyLevel) else "no assessment"
        formatter.add_text(f"Proficiency in {skill}: {shown}")
        formatter.add_blank_line()

    formatter.add_text("Suggested for resume:")
    formatter.add_text("  " + (", ".join(suggestions) or "(none)"))
    formatter.add_blank_line()

    formatter.add_text("Missing for target role:")
    formatter.add_bullets(recommendations.missing)
    formatter.add_text("Emerging technologies:")
    formatter.add_bullets(recommendations.emerging)
    formatter.add_text("Complementary skills:")
    formatter.add_bullets(recommendations.complementary)

    return formatter.render()
