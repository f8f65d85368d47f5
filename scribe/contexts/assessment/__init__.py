"""
Assessment Context

Responsibilities:
- Normalizes quiz, practice, project, and manual skill signals into assessments
- Resolves free-text skill names through the alias table
- Deduplicates signals into one assessment per canonical skill
- Suggests resume skills, estimates proficiency, and finds role skill gaps

Owns: Proficiency scale, source reliability weights, aggregation logic
Never: Scores resumes or fetches signals from their activity logs
"""

from scribe.contexts.assessment.aggregator import (
    collect_skill_assessments,
    deduplicate_assessments,
    generate_skill_recommendations,
    get_skill_proficiency_level,
    normalize_signals,
    suggest_skills_for_resume,
    weighted_level_average,
)
from scribe.contexts.assessment.aliases import (
    canonical_key,
    is_related,
    related_skills,
    resolve_canonical,
)
from scribe.contexts.assessment.assessment_data_structures import (
    ManualEntry,
    PracticeRecord,
    ProficiencyLevel,
    ProjectRecord,
    QuizResult,
    SkillAssessment,
    SkillRecommendations,
    SkillSignals,
    SkillSource,
)

__all__ = [
    # Aggregation
    "collect_skill_assessments",
    "normalize_signals",
    "deduplicate_assessments",
    "suggest_skills_for_resume",
    "get_skill_proficiency_level",
    "generate_skill_recommendations",
    "weighted_level_average",
    # Alias resolution
    "resolve_canonical",
    "canonical_key",
    "is_related",
    "related_skills",
    # Data structures
    "ProficiencyLevel",
    "SkillSource",
    "SkillAssessment",
    "SkillRecommendations",
    "SkillSignals",
    "QuizResult",
    "PracticeRecord",
    "ProjectRecord",
    "ManualEntry",
]
