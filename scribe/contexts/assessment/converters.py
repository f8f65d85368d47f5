"""
Per-source signal converters.

Each converter turns one kind of raw activity record into normalized
SkillAssessments. The source tag on every assessment carries its reliability
weight (quiz 0.4, dsa 0.3, project 0.2, manual 0.1), which aggregator.py uses
for weighted averaging and tie-breaking.
"""

from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from scribe.contexts.assessment.assessment_data_structures import (
    ManualEntry,
    PracticeRecord,
    ProficiencyLevel,
    ProjectRecord,
    QuizResult,
    SkillAssessment,
    SkillSource,
)
from scribe.utils.scoring_math import clamp_score

PRACTICE_SKILL_PREFIX = "Data Structures - "


def quiz_score_to_level(score: float) -> ProficiencyLevel:
    """Quiz score breakpoints: >=90 expert, >=75 advanced, >=60 intermediate."""
    if score >= 90:
        return ProficiencyLevel.EXPERT
    if score >= 75:
        return ProficiencyLevel.ADVANCED
    if score >= 60:
        return ProficiencyLevel.INTERMEDIATE
    return ProficiencyLevel.BEGINNER


def solve_rate_to_level(rate: float) -> ProficiencyLevel:
    """Practice solve-rate breakpoints: >=0.9 expert, >=0.7 advanced, >=0.5 intermediate."""
    if rate >= 0.9:
        return ProficiencyLevel.EXPERT
    if rate >= 0.7:
        return ProficiencyLevel.ADVANCED
    if rate >= 0.5:
        return ProficiencyLevel.INTERMEDIATE
    return ProficiencyLevel.BEGINNER


def project_count_to_level(count: int) -> ProficiencyLevel:
    """Project usage breakpoints: >=3 projects advanced, >=2 intermediate."""
    if count >= 3:
        return ProficiencyLevel.ADVANCED
    if count >= 2:
        return ProficiencyLevel.INTERMEDIATE
    return ProficiencyLevel.BEGINNER


def _latest(current: Optional[datetime], candidate: Optional[datetime]) -> Optional[datetime]:
    if candidate is None:
        return current
    if current is None or candidate.timestamp() > current.timestamp():
        return candidate
    return current


def quiz_to_assessments(quiz_results: Iterable[QuizResult]) -> List[SkillAssessment]:
    """One verified assessment per quiz, levelled by score."""
    return [
        SkillAssessment(
            skill=quiz.topic,
            level=quiz_score_to_level(quiz.score),
            verified=True,
            source=SkillSource.QUIZ,
            score=clamp_score(quiz.score),
            completed_at=quiz.completed_at,
        )
        for quiz in quiz_results
        if quiz.topic.strip()
    ]


def practice_to_assessments(practice: Iterable[PracticeRecord]) -> List[SkillAssessment]:
    """
    Aggregate practice problems by topic tag into one assessment per topic.

    A problem tagged with several topics counts toward each. The level comes from the
    solve rate; the score is the solve rate as a percentage.
    """
    totals: Dict[str, int] = defaultdict(int)
    solved: Dict[str, int] = defaultdict(int)
    latest: Dict[str, Optional[datetime]] = {}

    for problem in practice:
        for topic in problem.topics:
            if not topic.strip():
                continue
            totals[topic] += 1
            if problem.solved:
                solved[topic] += 1
            latest[topic] = _latest(latest.get(topic), problem.last_attempt)

    assessments = []
    for topic, total in totals.items():
        rate = solved[topic] / total
        assessments.append(
            SkillAssessment(
                skill=f"{PRACTICE_SKILL_PREFIX}{topic}",
                level=solve_rate_to_level(rate),
                verified=True,
                source=SkillSource.DSA,
                score=clamp_score(rate * 100),
                completed_at=latest[topic],
            )
        )
    return assessments


def projects_to_assessments(projects: Iterable[ProjectRecord]) -> List[SkillAssessment]:
    """
    Count how many projects used each technology and level by that count.

    Technologies are counted case-insensitively; the first spelling seen is kept.
    """
    counts: Dict[str, int] = defaultdict(int)
    spelling: Dict[str, str] = {}
    latest: Dict[str, Optional[datetime]] = {}

    for project in projects:
        # A technology listed twice in one project still counts once for that project
        seen = set()
        for tech in project.technologies:
            key = tech.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            spelling.setdefault(key, tech.strip())
            counts[key] += 1
            latest[key] = _latest(latest.get(key), project.completed_at)

    return [
        SkillAssessment(
            skill=spelling[key],
            level=project_count_to_level(count),
            verified=True,
            source=SkillSource.PROJECT,
            completed_at=latest[key],
        )
        for key, count in counts.items()
    ]


def manual_to_assessments(entries: Iterable[ManualEntry]) -> List[SkillAssessment]:
    """Self-reported skills: unverified, at the stated level or beginner."""
    return [
        SkillAssessment(
            skill=entry.skill.strip(),
            level=entry.level or ProficiencyLevel.BEGINNER,
            verified=False,
            source=SkillSource.MANUAL,
            completed_at=entry.completed_at,
        )
        for entry in entries
        if entry.skill.strip()
    ]
