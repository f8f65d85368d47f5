"""
ATS compatibility analysis entry point.

analyze() is pure, total, and deterministic: identical input yields an identical
ATSAnalysis, and no well-formed resume (including one with every field empty)
makes it raise.
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from scribe.contexts.screening.advice import generate_recommendations, generate_suggestions
from scribe.contexts.screening.analysis_data_structures import (
    ATSAnalysis,
    ATSScore,
    ATSScoreBreakdown,
    KeywordEntry,
)
from scribe.contexts.screening.issue_checks import check_formatting, check_structure
from scribe.contexts.screening.logger import log_analysis_result, log_role_resolution
from scribe.contexts.screening.patterns import PASSING_SCORE
from scribe.contexts.screening.resume_record import ResumeRecord
from scribe.contexts.screening.scorer import (
    build_keyword_entries,
    overall_score,
    score_formatting,
    score_keywords_from_entries,
    score_length,
    score_readability,
    score_structure,
)
from scribe.contexts.taxonomy import Taxonomy, get_taxonomy, resolve_role


def calculate_ats_score(
    resume: ResumeRecord,
    target_role: Optional[str] = None,
    taxonomy: Optional[Taxonomy] = None,
    keyword_entries: Optional[Sequence[KeywordEntry]] = None,
) -> ATSScore:
    """
    Compute the five sub-scores, the weighted overall score, and suggestions.

    Args:
        resume: Resume to score
        target_role: Optional free-text target role
        taxonomy: Taxonomy snapshot (defaults to the active taxonomy)
        keyword_entries: Entries for every relevant keyword, if already built

    Returns:
        ATSScore with passes_ats set when overall >= 75
    """
    taxonomy = taxonomy or get_taxonomy()
    if keyword_entries is None:
        keyword_entries = build_keyword_entries(resume, target_role, taxonomy)

    breakdown = ATSScoreBreakdown(
        formatting=score_formatting(resume),
        keywords=score_keywords_from_entries(keyword_entries),
        structure=score_structure(resume),
        readability=score_readability(resume, taxonomy),
        length=score_length(resume),
    )
    overall = overall_score(breakdown)

    return ATSScore(
        overall=overall,
        breakdown=breakdown,
        suggestions=tuple(generate_suggestions(breakdown)),
        passes_ats=overall >= PASSING_SCORE,
    )


def rank_reported_keywords(
    keyword_entries: Sequence[KeywordEntry], taxonomy: Taxonomy
) -> List[KeywordEntry]:
    """
    Pick the keyword entries shown to the user, highest importance first.

    Only the global keyword list is reported. Role-only keywords count toward the
    keyword score but never appear as entries; role keywords that are also on the
    global list keep their boosted importance. Ties keep global list order.
    """
    reported = set(taxonomy.tech_keywords)
    return sorted(
        (entry for entry in keyword_entries if entry.keyword in reported),
        key=lambda k: k.importance,
        reverse=True,
    )


def analyze(
    resume: Union[ResumeRecord, Mapping[str, Any]],
    target_role: Optional[str] = None,
) -> ATSAnalysis:
    """
    Estimate how well a resume will fare with applicant tracking systems.

    Args:
        resume: ResumeRecord, or a loose mapping accepted by ResumeRecord.from_dict()
        target_role: Optional free-text target role (e.g., "Senior Frontend Engineer").
            Unmatched roles fall back to role-agnostic scoring.

    Returns:
        ATSAnalysis with score, ranked keywords, issues, and recommendations

    Example:
        >>> analysis = analyze({"name": "Ada", "skills": "Python, SQL"}, "data analyst")
        >>> analysis.score.passes_ats
        False
    """
    if not isinstance(resume, ResumeRecord):
        resume = ResumeRecord.from_dict(resume)

    # One snapshot for the whole call, even if the taxonomy is reloaded meanwhile
    taxonomy = get_taxonomy()
    log_role_resolution(target_role, resolve_role(target_role, taxonomy.ats_role_keywords))

    keyword_entries = build_keyword_entries(resume, target_role, taxonomy)
    score = calculate_ats_score(resume, target_role, taxonomy, keyword_entries)
    keywords = rank_reported_keywords(keyword_entries, taxonomy)
    format_issues = check_formatting(resume)
    structure_issues = check_structure(resume)
    recommendations = generate_recommendations(score, keywords, format_issues, structure_issues)

    analysis = ATSAnalysis(
        score=score,
        keywords=tuple(keywords),
        format_issues=tuple(format_issues),
        structure_issues=tuple(structure_issues),
        recommendations=tuple(recommendations),
    )
    log_analysis_result(analysis)
    return analysis
