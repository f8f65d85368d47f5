"""
ATS Analysis Data Structures

Defines the result types produced by the Screening context: score breakdown,
suggestions, keyword entries, and the full analysis.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


class Severity(Enum):
    """How urgently a suggestion should be addressed."""

    CRITICAL = "critical"
    WARNING = "warning"
    IMPROVEMENT = "improvement"


class ScoreCategory(Enum):
    """Sub-score a suggestion belongs to."""

    FORMATTING = "formatting"
    KEYWORDS = "keywords"
    STRUCTURE = "structure"
    READABILITY = "readability"
    LENGTH = "length"


@dataclass(frozen=True)
class ATSScoreBreakdown:
    """
    Five sub-scores, each an integer in [0, 100].

    Attributes:
        formatting: Contact formats and parser-hostile characters
        keywords: Weighted coverage of screening keywords
        structure: Presence of required sections and fields
        readability: Bullets, action verbs, quantified results
        length: Word count against the optimal 400-800 range
    """

    formatting: int
    keywords: int
    structure: int
    readability: int
    length: int


@dataclass(frozen=True)
class ATSSuggestion:
    """
    Actionable suggestion tied to one sub-score.

    Attributes:
        id: Stable identifier (e.g., "keywords-1")
        severity: Urgency of the suggestion
        category: Sub-score it addresses
        title: Short headline
        description: What to change
        impact: Estimated score points recoverable
    """

    id: str
    severity: Severity
    category: ScoreCategory
    title: str
    description: str
    impact: int


@dataclass(frozen=True)
class ATSScore:
    """Overall score, breakdown, and ranked suggestions."""

    overall: int
    breakdown: ATSScoreBreakdown
    suggestions: Tuple[ATSSuggestion, ...] = field(default_factory=tuple)
    passes_ats: bool = False


@dataclass(frozen=True)
class KeywordEntry:
    """
    Screening keyword and whether the resume contains it.

    Attributes:
        keyword: Lowercase keyword as matched
        importance: Weight in [1, 5]
        found: True if the keyword occurs in the resume text or skills list
        variations: Alternative spellings worth mentioning to the user
    """

    keyword: str
    importance: int
    found: bool
    variations: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ATSAnalysis:
    """
    Complete result of analyze().

    Attributes:
        score: Overall score with breakdown and suggestions
        keywords: Keyword entries, highest importance first
        format_issues: Concrete formatting problems found
        structure_issues: Concrete missing sections/fields
        recommendations: Free-text advice, most important first
    """

    score: ATSScore
    keywords: Tuple[KeywordEntry, ...] = field(default_factory=tuple)
    format_issues: Tuple[str, ...] = field(default_factory=tuple)
    structure_issues: Tuple[str, ...] = field(default_factory=tuple)
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    def get_missing_keywords(self, min_importance: int = 1) -> List[str]:
        """Return unfound keywords at or above an importance level, in ranked order."""
        return [k.keyword for k in self.keywords if not k.found and k.importance >= min_importance]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python types (enums as their values) for serialization."""

        def _plain(value):
            if isinstance(value, Enum):
                return value.value
            if isinstance(value, dict):
                return {k: _plain(v) for k, v in value.items()}
            if isinstance(value, (list, tuple)):
                return [_plain(v) for v in value]
            return value

        return _plain(asdict(self))
