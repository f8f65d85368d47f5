"""
Skill Assessment Data Structures

Defines the ordinal proficiency scale, signal sources with their reliability
weights, the normalized SkillAssessment, and the raw per-source signal records
that converters.py turns into assessments.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from functools import total_ordering
from typing import Any, Mapping, Optional, Tuple


@total_ordering
class ProficiencyLevel(Enum):
    """Ordinal proficiency: beginner < intermediate < advanced < expert."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def score(self) -> int:
        """Numeric score used for weighted averaging (beginner=1 ... expert=4)."""
        return LEVEL_SCORES[self]

    @classmethod
    def from_score(cls, average: float) -> "ProficiencyLevel":
        """Map a continuous 1-4 average back onto a level (3.5 / 2.5 / 1.5 breakpoints)."""
        if average >= 3.5:
            return cls.EXPERT
        if average >= 2.5:
            return cls.ADVANCED
        if average >= 1.5:
            return cls.INTERMEDIATE
        return cls.BEGINNER

    @classmethod
    def parse(cls, value: Any) -> "ProficiencyLevel":
        """
        Parse a level name case-insensitively.

        Raises:
            ValueError: If value is not one of the four level names
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    def __lt__(self, other):
        if not isinstance(other, ProficiencyLevel):
            return NotImplemented
        return self.score < other.score


LEVEL_SCORES = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
    ProficiencyLevel.EXPERT: 4,
}


class SkillSource(Enum):
    """Activity a skill signal came from, in reliability order quiz > dsa > project > manual."""

    QUIZ = "quiz"
    DSA = "dsa"
    PROJECT = "project"
    MANUAL = "manual"

    @property
    def reliability_rank(self) -> int:
        """Tie-break rank; higher is more reliable."""
        return SOURCE_RELIABILITY[self][0]

    @property
    def weight(self) -> float:
        """Weight used when averaging conflicting signals for the same skill."""
        return SOURCE_RELIABILITY[self][1]


# source -> (rank, weight)
SOURCE_RELIABILITY = {
    SkillSource.QUIZ: (4, 0.4),
    SkillSource.DSA: (3, 0.3),
    SkillSource.PROJECT: (2, 0.2),
    SkillSource.MANUAL: (1, 0.1),
}


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an optional timestamp from a datetime, date, or ISO 8601 string.

    Returns None for missing or unparsable values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


def _number(value: Any, default: float = 0.0) -> float:
    """
    Coerce a loose numeric field, using the default for missing or non-numeric values.

    Raises:
        ValueError: If the value is NaN or infinite
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        raise ValueError(f"Expected a finite number, got {value!r}")
    return number


def _text(value: Any) -> str:
    return "" if value is None else str(value)


# =============================================================================
# NORMALIZED ASSESSMENT
# =============================================================================


@dataclass(frozen=True)
class SkillAssessment:
    """
    One normalized skill signal.

    Attributes:
        skill: Skill name (canonical or as reported by the source)
        level: Ordinal proficiency
        verified: True if backed by an activity rather than self-reported
        source: Where the signal came from
        score: Optional 0-100 score from the source
        completed_at: When the underlying activity happened, if known
    """

    skill: str
    level: ProficiencyLevel
    verified: bool
    source: SkillSource
    score: Optional[int] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillAssessment":
        """
        Build an assessment from a mapping (e.g., a stored profile entry).

        Raises:
            ValueError: If level or source is not a recognised value
        """
        score = data.get("score")
        return cls(
            skill=_text(data.get("skill")),
            level=ProficiencyLevel.parse(data.get("level") or ProficiencyLevel.BEGINNER),
            verified=bool(data.get("verified", False)),
            source=SkillSource(str(data.get("source") or SkillSource.MANUAL.value).lower()),
            score=None if score is None else int(_number(score)),
            completed_at=parse_datetime(data.get("completed_at", data.get("completedAt"))),
        )


# =============================================================================
# RAW SIGNALS
# =============================================================================


@dataclass(frozen=True)
class QuizResult:
    """Result of one topic quiz."""

    topic: str
    score: float = 0.0
    difficulty: str = ""
    completed_at: Optional[datetime] = None
    questions_answered: int = 0
    total_questions: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuizResult":
        return cls(
            topic=_text(data.get("topic")),
            score=_number(data.get("score")),
            difficulty=_text(data.get("difficulty")),
            completed_at=parse_datetime(data.get("completed_at", data.get("completedAt"))),
            questions_answered=int(
                _number(data.get("questions_answered", data.get("questionsAnswered")))
            ),
            total_questions=int(_number(data.get("total_questions", data.get("totalQuestions")))),
        )


@dataclass(frozen=True)
class PracticeRecord:
    """One data-structures/algorithms practice problem and the user's progress on it."""

    problem_id: str
    title: str = ""
    difficulty: str = ""
    topics: Tuple[str, ...] = field(default_factory=tuple)
    solved: bool = False
    attempts: int = 0
    last_attempt: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PracticeRecord":
        return cls(
            problem_id=_text(data.get("problem_id", data.get("problemId"))),
            title=_text(data.get("title")),
            difficulty=_text(data.get("difficulty")),
            topics=tuple(_text(t) for t in data.get("topics") or ()),
            solved=bool(data.get("solved", False)),
            attempts=int(_number(data.get("attempts"))),
            last_attempt=parse_datetime(data.get("last_attempt", data.get("lastAttempt"))),
        )


@dataclass(frozen=True)
class ProjectRecord:
    """Completed project and the technologies it used."""

    name: str
    technologies: Tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    completed_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectRecord":
        return cls(
            name=_text(data.get("name")),
            technologies=tuple(_text(t) for t in data.get("technologies") or ()),
            description=_text(data.get("description")),
            completed_at=parse_datetime(data.get("completed_at", data.get("completedAt"))),
        )


@dataclass(frozen=True)
class ManualEntry:
    """Self-reported skill, optionally with a stated level."""

    skill: str
    level: Optional[ProficiencyLevel] = None
    completed_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ManualEntry":
        level = data.get("level")
        return cls(
            skill=_text(data.get("skill")),
            level=ProficiencyLevel.parse(level) if level else None,
            completed_at=parse_datetime(data.get("completed_at", data.get("completedAt"))),
        )


@dataclass(frozen=True)
class SkillSignals:
    """Fully materialized raw signals for one user, grouped by source."""

    quiz_results: Tuple[QuizResult, ...] = field(default_factory=tuple)
    practice: Tuple[PracticeRecord, ...] = field(default_factory=tuple)
    projects: Tuple[ProjectRecord, ...] = field(default_factory=tuple)
    manual: Tuple[ManualEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SkillSignals":
        """
        Build from a mapping with optional "quiz_results", "practice", "projects",
        and "manual" lists.

        Raises:
            ValueError: If a manual entry states an unknown level
        """
        data = data or {}
        return cls(
            quiz_results=tuple(QuizResult.from_dict(q) for q in data.get("quiz_results") or ()),
            practice=tuple(PracticeRecord.from_dict(p) for p in data.get("practice") or ()),
            projects=tuple(ProjectRecord.from_dict(p) for p in data.get("projects") or ()),
            manual=tuple(ManualEntry.from_dict(m) for m in data.get("manual") or ()),
        )


@dataclass(frozen=True)
class SkillRecommendations:
    """
    Skill gap analysis.

    Attributes:
        missing: Role-required skills the user has nothing related to (max 5)
        emerging: Emerging technologies the user has not picked up (max 3)
        complementary: Skills that usually accompany the user's current ones (max 5)
    """

    missing: Tuple[str, ...] = field(default_factory=tuple)
    emerging: Tuple[str, ...] = field(default_factory=tuple)
    complementary: Tuple[str, ...] = field(default_factory=tuple)
