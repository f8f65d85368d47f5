"""
Regex patterns and fixed scoring constants for ATS screening.

Pattern classes follow the frozen-dataclass convention: class-level compiled
patterns, immutable, grouped by what they detect.

The weights, penalties, and thresholds below are hand-tuned and must stay exactly
as they are; changing any of them changes every score.
"""

import re
from dataclasses import dataclass

from scribe.contexts.screening.analysis_data_structures import ScoreCategory, Severity

# =============================================================================
# CONTACT AND CHARACTER PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """Patterns for contact fields and parser-hostile characters."""

    # Whole-field match: something@something.tld with no spaces or extra @
    EMAIL: re.Pattern = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

    # Loose phone check: a run of 10+ digits/separators anywhere in the field
    PHONE: re.Pattern = re.compile(r"[0-9\s\-+()]{10,}")

    # Anything outside ASCII word characters, whitespace, @, ., -
    SPECIAL_CHARACTER: re.Pattern = re.compile(r"[^A-Za-z0-9_\s@.\-]")


# =============================================================================
# READABILITY PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ReadabilityPatterns:
    """Patterns for bullet formatting and quantified achievements."""

    BULLET_GLYPH: re.Pattern = re.compile(r"[•·▪▫‣⁃]")

    # Line-leading bullets written as plain text
    LINE_BULLETS = ("\n-", "\n•")

    # 40%, 10+, $500, 3x
    QUANTIFIED_RESULT: re.Pattern = re.compile(r"\d+%|\d+\+|\$\d+|\d+x")


# =============================================================================
# SCORING CONSTANTS
# =============================================================================

SUB_SCORE_WEIGHTS = {
    ScoreCategory.FORMATTING: 0.25,
    ScoreCategory.KEYWORDS: 0.30,
    ScoreCategory.STRUCTURE: 0.20,
    ScoreCategory.READABILITY: 0.15,
    ScoreCategory.LENGTH: 0.10,
}

PASSING_SCORE = 75

# Formatting penalties
SPECIAL_CHARACTER_PENALTY = 2
SPECIAL_CHARACTER_PENALTY_CAP = 30
INVALID_EMAIL_PENALTY = 10
INVALID_PHONE_PENALTY = 5

# Keyword importance
BASE_IMPORTANCE = 2
HIGH_IMPORTANCE = 4
ROLE_IMPORTANCE_BOOST = 2
MAX_IMPORTANCE = 5
RECOMMENDED_KEYWORD_IMPORTANCE = 3
MAX_RECOMMENDED_KEYWORDS = 5

# Structure penalties for missing top-level fields
MISSING_FIELD_PENALTIES = {
    "name": 20,
    "email": 15,
    "phone": 10,
    "summary": 15,
    "skills": 20,
}
MISSING_EXPERIENCE_PENALTY = 30
MISSING_ENTRY_FIELD_PENALTIES = {
    "role": 5,
    "company": 5,
    "description": 10,
}

# Readability penalties
NO_BULLETS_PENALTY = 20
NO_ACTION_VERBS_PENALTY = 15
NO_QUANTIFIED_RESULTS_PENALTY = 15


@dataclass(frozen=True)
class SuggestionRule:
    """Emit a suggestion when a sub-score falls below threshold."""

    category: ScoreCategory
    threshold: int
    target: int
    severity: Severity
    title: str
    description: str


SUGGESTION_RULES = (
    SuggestionRule(
        category=ScoreCategory.FORMATTING,
        threshold=80,
        target=85,
        severity=Severity.CRITICAL,
        title="Improve ATS-friendly formatting",
        description=(
            "Use standard fonts, avoid special characters, and ensure proper contact "
            "information format"
        ),
    ),
    SuggestionRule(
        category=ScoreCategory.KEYWORDS,
        threshold=70,
        target=75,
        severity=Severity.CRITICAL,
        title="Add more relevant keywords",
        description=(
            "Include more technical skills and industry-specific terms relevant to your "
            "target role"
        ),
    ),
    SuggestionRule(
        category=ScoreCategory.STRUCTURE,
        threshold=80,
        target=85,
        severity=Severity.WARNING,
        title="Complete all required sections",
        description=(
            "Ensure all sections (contact, summary, skills, experience) are properly filled"
        ),
    ),
    SuggestionRule(
        category=ScoreCategory.READABILITY,
        threshold=75,
        target=80,
        severity=Severity.IMPROVEMENT,
        title="Improve readability",
        description="Use bullet points, action verbs, and quantifiable achievements",
    ),
)
