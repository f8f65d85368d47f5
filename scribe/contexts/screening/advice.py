"""
Suggestions and recommendations derived from screening scores.

Suggestions are structured (one per under-threshold sub-score, ranked by
recoverable points). Recommendations are the free-text summary shown to users.
"""

from typing import List, Sequence

from scribe.contexts.screening.analysis_data_structures import (
    ATSScore,
    ATSScoreBreakdown,
    ATSSuggestion,
    KeywordEntry,
    ScoreCategory,
)
from scribe.contexts.screening.patterns import (
    MAX_RECOMMENDED_KEYWORDS,
    PASSING_SCORE,
    RECOMMENDED_KEYWORD_IMPORTANCE,
    SUGGESTION_RULES,
)


def generate_suggestions(breakdown: ATSScoreBreakdown) -> List[ATSSuggestion]:
    """
    Emit one suggestion per sub-score below its threshold.

    Args:
        breakdown: Sub-scores to evaluate

    Returns:
        Suggestions sorted by impact, largest first (ties keep rule order)
    """
    suggestions = []

    for rule in SUGGESTION_RULES:
        actual = getattr(breakdown, rule.category.value)
        if actual < rule.threshold:
            suggestions.append(
                ATSSuggestion(
                    id=f"{rule.category.value}-1",
                    severity=rule.severity,
                    category=rule.category,
                    title=rule.title,
                    description=rule.description,
                    impact=rule.target - actual,
                )
            )

    return sorted(suggestions, key=lambda s: s.impact, reverse=True)


def _rule_threshold(category: ScoreCategory) -> int:
    return next(rule.threshold for rule in SUGGESTION_RULES if rule.category == category)


def generate_recommendations(
    score: ATSScore,
    keywords: Sequence[KeywordEntry],
    format_issues: Sequence[str],
    structure_issues: Sequence[str],
) -> List[str]:
    """
    Summarize what to do next, most important first.

    Args:
        score: Overall score and breakdown
        keywords: Keyword entries, highest importance first
        format_issues: Output of check_formatting()
        structure_issues: Output of check_structure()

    Returns:
        Recommendation sentences
    """
    recommendations = []
    breakdown = score.breakdown

    if score.overall < PASSING_SCORE:
        recommendations.append(
            "Your resume needs improvement to pass ATS screening. "
            "Focus on the critical issues first."
        )

    if format_issues:
        count = len(format_issues)
        recommendations.append(
            f"Fix {count} formatting issue{'s' if count != 1 else ''} to ensure ATS can "
            "properly parse your resume."
        )

    if structure_issues:
        count = len(structure_issues)
        recommendations.append(
            f"Complete all required sections for better ATS compatibility "
            f"({count} missing item{'s' if count != 1 else ''})."
        )

    if breakdown.keywords < _rule_threshold(ScoreCategory.KEYWORDS):
        recommendations.append(
            "Mirror the technical skills and terms used in postings for your target role."
        )

    missing = [
        k.keyword
        for k in keywords
        if not k.found and k.importance >= RECOMMENDED_KEYWORD_IMPORTANCE
    ]
    if missing:
        recommendations.append(
            "Consider adding these important keywords: "
            + ", ".join(missing[:MAX_RECOMMENDED_KEYWORDS])
        )

    if breakdown.readability < _rule_threshold(ScoreCategory.READABILITY):
        recommendations.append("Use bullet points and action verbs to improve readability.")

    return recommendations
