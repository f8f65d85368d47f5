"""
Skill Assessment Aggregator

Reconciles skill signals from unrelated activities into a deduplicated, ranked
profile and answers the three questions the resume builder asks:

- Which skills should go on the resume? (suggest_skills_for_resume)
- How proficient is the user in one skill? (get_skill_proficiency_level)
- What is missing for a target role? (generate_skill_recommendations)

All functions are pure. Each call reads one taxonomy snapshot and never mutates
its inputs.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from scribe.contexts.assessment.aliases import canonical_key, is_related, related_skills
from scribe.contexts.assessment.assessment_data_structures import (
    ManualEntry,
    PracticeRecord,
    ProficiencyLevel,
    ProjectRecord,
    QuizResult,
    SkillAssessment,
    SkillRecommendations,
)
from scribe.contexts.assessment.converters import (
    manual_to_assessments,
    practice_to_assessments,
    projects_to_assessments,
    quiz_to_assessments,
)
from scribe.contexts.assessment.logger import (
    log_deduplication,
    log_proficiency,
    log_recommendations,
)
from scribe.contexts.taxonomy import Taxonomy, get_taxonomy, role_entries

MAX_RESUME_SKILLS = 20
MAX_MISSING = 5
MAX_EMERGING = 3
MAX_COMPLEMENTARY = 5

# =============================================================================
# DEDUPLICATION AND RANKING
# =============================================================================


def _preference_key(assessment: SkillAssessment) -> Tuple:
    """
    Sort key where the preferred assessment sorts first.

    Higher level, then more reliable source, then verified, then most recent,
    then higher score, then skill name. Every field takes part, so the choice never
    depends on input order.
    """
    completed = assessment.completed_at.timestamp() if assessment.completed_at else float("-inf")
    score = assessment.score if assessment.score is not None else -1
    return (
        -assessment.level.score,
        -assessment.source.reliability_rank,
        not assessment.verified,
        -completed,
        -score,
        assessment.skill,
    )


def deduplicate_assessments(
    assessments: Iterable[SkillAssessment], taxonomy: Optional[Taxonomy] = None
) -> List[SkillAssessment]:
    """
    Keep one assessment per canonical skill and rank the survivors.

    Assessments are grouped by resolved canonical skill (unrecognised names group
    by their normalized text). Within a group the highest level wins, ties going
    to the more reliable source (quiz > dsa > project > manual).

    Args:
        assessments: Assessments from any mix of sources
        taxonomy: Taxonomy snapshot (defaults to the active taxonomy)

    Returns:
        One assessment per canonical skill, highest level first
    """
    taxonomy = taxonomy or get_taxonomy()
    best: Dict[str, SkillAssessment] = {}
    received = 0

    for assessment in assessments:
        received += 1
        key = canonical_key(assessment.skill, taxonomy)
        current = best.get(key)
        if current is None or _preference_key(assessment) < _preference_key(current):
            best[key] = assessment

    ranked = sorted(
        best.items(),
        key=lambda item: (
            -item[1].level.score,
            -item[1].source.reliability_rank,
            item[0].lower(),
        ),
    )
    log_deduplication(received, len(ranked))
    return [assessment for _, assessment in ranked]


def normalize_signals(
    quiz_results: Iterable[QuizResult] = (),
    practice: Iterable[PracticeRecord] = (),
    projects: Iterable[ProjectRecord] = (),
    manual: Iterable[ManualEntry] = (),
) -> List[SkillAssessment]:
    """Convert every source's raw signals into assessments, without deduplicating."""
    return (
        quiz_to_assessments(quiz_results)
        + practice_to_assessments(practice)
        + projects_to_assessments(projects)
        + manual_to_assessments(manual)
    )


def collect_skill_assessments(
    quiz_results: Iterable[QuizResult] = (),
    practice: Iterable[PracticeRecord] = (),
    projects: Iterable[ProjectRecord] = (),
    manual: Iterable[ManualEntry] = (),
) -> List[SkillAssessment]:
    """
    Convert every source's raw signals and reconcile them into one ranked profile.

    Args:
        quiz_results: Quiz history
        practice: Practice-problem progress
        projects: Completed projects
        manual: Self-reported skills

    Returns:
        Deduplicated assessments, highest level first
    """
    return deduplicate_assessments(normalize_signals(quiz_results, practice, projects, manual))


# =============================================================================
# RESUME SUGGESTIONS
# =============================================================================


def suggest_skills_for_resume(
    assessments: Sequence[SkillAssessment], target_role: Optional[str] = None
) -> List[str]:
    """
    Suggest skill names to list on a resume.

    Starts with every verified assessment above beginner plus its canonical skill.
    With a target role, also adds the role's required skills, but only those the
    user already holds a related above-beginner assessment for.

    Args:
        assessments: Normalized assessments (deduplicated or not)
        target_role: Optional free-text target role

    Returns:
        Up to 20 skill names, first-seen order, no case-insensitive duplicates
    """
    taxonomy = get_taxonomy()
    suggestions: Dict[str, str] = {}

    def add(skill: str) -> None:
        suggestions.setdefault(skill.lower(), skill)

    for assessment in assessments:
        if assessment.verified and assessment.level != ProficiencyLevel.BEGINNER:
            add(assessment.skill)
            for related in related_skills(assessment.skill, taxonomy):
                add(related)

    for skill in role_entries(target_role, taxonomy.role_requirements):
        has_related = any(
            is_related(a.skill, skill, taxonomy) and a.level != ProficiencyLevel.BEGINNER
            for a in assessments
        )
        if has_related:
            add(skill)

    return list(suggestions.values())[:MAX_RESUME_SKILLS]


# =============================================================================
# PROFICIENCY
# =============================================================================


def weighted_level_average(assessments: Iterable[SkillAssessment]) -> Optional[float]:
    """
    Reliability-weighted average of level scores (beginner=1 ... expert=4).

    Returns:
        Average in [1, 4], or None if there are no assessments
    """
    total_weight = 0.0
    weighted_score = 0.0

    for assessment in assessments:
        weight = assessment.source.weight
        total_weight += weight
        weighted_score += assessment.level.score * weight

    if total_weight == 0:
        return None
    return weighted_score / total_weight


def get_skill_proficiency_level(
    skill: str, assessments: Sequence[SkillAssessment]
) -> Optional[ProficiencyLevel]:
    """
    Estimate overall proficiency in one skill from every related signal.

    Args:
        skill: Skill to query (any alias works)
        assessments: Normalized assessments

    Returns:
        Level from the weighted average (3.5 / 2.5 / 1.5 breakpoints), or None if
        no assessment is related to the skill

    Example:
        A quiz at advanced (weight 0.4) and one project at beginner (weight 0.2)
        average (3 * 0.4 + 1 * 0.2) / 0.6 = 2.33, which is intermediate.
    """
    taxonomy = get_taxonomy()
    related = [a for a in assessments if is_related(a.skill, skill, taxonomy)]

    average = weighted_level_average(related)
    if average is None:
        log_proficiency(skill, len(related), None, None)
        return None

    level = ProficiencyLevel.from_score(average)
    log_proficiency(skill, len(related), average, level)
    return level


# =============================================================================
# GAP ANALYSIS
# =============================================================================


def _complementary_for(skill: str, taxonomy: Taxonomy) -> Tuple[str, ...]:
    """Complementary skills for a skill, looked up by exact name, then canonical name."""
    table = taxonomy.complementary_skills
    if skill in table:
        return table[skill]

    key = canonical_key(skill, taxonomy)
    for name, complements in table.items():
        if name.lower() == key.lower():
            return complements
    return ()


def generate_skill_recommendations(
    current_skills: Sequence[str], target_role: Optional[str] = None
) -> SkillRecommendations:
    """
    Compare current skills against a target role, emerging tech, and common pairings.

    Args:
        current_skills: Skill names the user already has
        target_role: Optional free-text target role. Without one (or with an
            unrecognised one) no skills are reported as missing.

    Returns:
        SkillRecommendations with missing (max 5, role order), emerging (max 3),
        and complementary (max 5, first-found order)
    """
    taxonomy = get_taxonomy()

    def has_related(candidate: str) -> bool:
        return any(is_related(current, candidate, taxonomy) for current in current_skills)

    missing = [
        skill
        for skill in role_entries(target_role, taxonomy.role_requirements)
        if not has_related(skill)
    ]

    emerging = [tech for tech in taxonomy.emerging_technologies if not has_related(tech)]

    complementary: List[str] = []
    for skill in current_skills:
        for complement in _complementary_for(skill, taxonomy):
            if not has_related(complement) and complement not in complementary:
                complementary.append(complement)

    recommendations = SkillRecommendations(
        missing=tuple(missing[:MAX_MISSING]),
        emerging=tuple(emerging[:MAX_EMERGING]),
        complementary=tuple(complementary[:MAX_COMPLEMENTARY]),
    )
    log_recommendations(target_role, recommendations)
    return recommendations
