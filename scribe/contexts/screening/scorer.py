"""
ATS sub-score calculations.

Each score_* function is pure: it reads a ResumeRecord (and, for keywords, a
Taxonomy snapshot) and returns an integer in [0, 100].
"""

import re
from typing import List, Optional, Tuple

from scribe.contexts.screening.analysis_data_structures import (
    ATSScoreBreakdown,
    KeywordEntry,
)
from scribe.contexts.screening.patterns import (
    BASE_IMPORTANCE,
    HIGH_IMPORTANCE,
    INVALID_EMAIL_PENALTY,
    INVALID_PHONE_PENALTY,
    MAX_IMPORTANCE,
    MISSING_ENTRY_FIELD_PENALTIES,
    MISSING_EXPERIENCE_PENALTY,
    MISSING_FIELD_PENALTIES,
    NO_ACTION_VERBS_PENALTY,
    NO_BULLETS_PENALTY,
    NO_QUANTIFIED_RESULTS_PENALTY,
    ROLE_IMPORTANCE_BOOST,
    SPECIAL_CHARACTER_PENALTY,
    SPECIAL_CHARACTER_PENALTY_CAP,
    SUB_SCORE_WEIGHTS,
    ContactPatterns,
    ReadabilityPatterns,
)
from scribe.contexts.screening.resume_record import ResumeRecord
from scribe.contexts.taxonomy import Taxonomy, role_entries
from scribe.utils.scoring_math import clamp_score, round_half_up

# =============================================================================
# CONTACT CHECKS
# =============================================================================


def is_valid_email(email: str) -> bool:
    """True if the whole field looks like local@domain.tld."""
    return ContactPatterns.EMAIL.fullmatch(email or "") is not None


def is_valid_phone(phone: str) -> bool:
    """True if the field contains a run of at least 10 digits/separators."""
    return ContactPatterns.PHONE.search(phone or "") is not None


def count_special_characters(text: str) -> int:
    """Count characters that commonly confuse resume parsers."""
    return len(ContactPatterns.SPECIAL_CHARACTER.findall(text))


def count_words(text: str) -> int:
    """
    Count whitespace-separated pieces of text.

    Leading/trailing whitespace yields an empty piece, and empty text counts as one
    piece; length scoring was calibrated against this count.
    """
    return len(re.split(r"\s+", text))


# =============================================================================
# SUB-SCORES
# =============================================================================


def score_formatting(resume: ResumeRecord) -> int:
    """Start at 100; deduct for special characters and malformed contact details."""
    score = 100

    special_count = count_special_characters(resume.get_all_text())
    score -= min(special_count * SPECIAL_CHARACTER_PENALTY, SPECIAL_CHARACTER_PENALTY_CAP)

    if not is_valid_email(resume.email):
        score -= INVALID_EMAIL_PENALTY
    if not is_valid_phone(resume.phone):
        score -= INVALID_PHONE_PENALTY

    return clamp_score(score)


def relevant_keywords(target_role: Optional[str], taxonomy: Taxonomy) -> Tuple[List[str], set]:
    """
    Collect the screening keywords for a target role.

    Args:
        target_role: Free-text target role (None for role-agnostic scoring)
        taxonomy: Taxonomy snapshot

    Returns:
        (keywords, role_keywords) where keywords is the global list followed by any
        role-specific keywords not already present, and role_keywords is the set of
        role-specific keywords used for the importance boost
    """
    role_keywords = [k.lower() for k in role_entries(target_role, taxonomy.ats_role_keywords)]

    keywords = list(dict.fromkeys(list(taxonomy.tech_keywords) + role_keywords))
    return keywords, set(role_keywords)


def keyword_importance(keyword: str, role_keywords: set, taxonomy: Taxonomy) -> int:
    """Importance 2 by default, 4 for high-importance keywords, +2 (max 5) if role-specific."""
    importance = BASE_IMPORTANCE
    if keyword in taxonomy.high_importance_keywords:
        importance = HIGH_IMPORTANCE
    if keyword in role_keywords:
        importance = min(MAX_IMPORTANCE, importance + ROLE_IMPORTANCE_BOOST)
    return importance


def build_keyword_entries(
    resume: ResumeRecord, target_role: Optional[str], taxonomy: Taxonomy
) -> List[KeywordEntry]:
    """
    Build one KeywordEntry per relevant keyword, in relevance order.

    A keyword is found if it is a substring of the lowercased resume text or of
    any comma-separated skill.
    """
    text = resume.get_all_text().lower()
    skills = resume.get_skill_list()
    keywords, role_keywords = relevant_keywords(target_role, taxonomy)

    entries = []
    for keyword in keywords:
        found = keyword in text or any(keyword in skill for skill in skills)
        entries.append(
            KeywordEntry(
                keyword=keyword,
                importance=keyword_importance(keyword, role_keywords, taxonomy),
                found=found,
                variations=tuple(taxonomy.keyword_variations.get(keyword, ())),
            )
        )
    return entries


def score_keywords_from_entries(entries: List[KeywordEntry]) -> int:
    """Importance-weighted share of keywords found, as a percentage."""
    total = sum(e.importance for e in entries)
    found = sum(e.importance for e in entries if e.found)
    return min(100, round_half_up(found / max(total, 1) * 100))


def score_keywords(resume: ResumeRecord, target_role: Optional[str], taxonomy: Taxonomy) -> int:
    """Weighted keyword coverage for the target role."""
    return score_keywords_from_entries(build_keyword_entries(resume, target_role, taxonomy))


def score_structure(resume: ResumeRecord) -> int:
    """Start at 100; deduct for each missing required field or experience detail."""
    score = 100

    for field_name, penalty in MISSING_FIELD_PENALTIES.items():
        if not getattr(resume, field_name).strip():
            score -= penalty

    if not resume.experience:
        score -= MISSING_EXPERIENCE_PENALTY

    for entry in resume.experience:
        for field_name, penalty in MISSING_ENTRY_FIELD_PENALTIES.items():
            if not getattr(entry, field_name).strip():
                score -= penalty

    return clamp_score(score)


def has_bullet_points(resume: ResumeRecord) -> bool:
    """True if any experience description uses bullet glyphs or dash-led lines."""
    for entry in resume.experience:
        description = entry.description
        if ReadabilityPatterns.BULLET_GLYPH.search(description):
            return True
        if any(marker in description for marker in ReadabilityPatterns.LINE_BULLETS):
            return True
    return False


def has_action_verbs(text: str, taxonomy: Taxonomy) -> bool:
    """True if any recognised action verb occurs in the text."""
    text_lower = text.lower()
    return any(verb in text_lower for verb in taxonomy.action_verbs)


def has_quantified_results(text: str) -> bool:
    """True if the text contains a percentage, "N+", "$amount", or "Nx"."""
    return ReadabilityPatterns.QUANTIFIED_RESULT.search(text) is not None


def score_readability(resume: ResumeRecord, taxonomy: Taxonomy) -> int:
    """Start at 100; deduct for missing bullets, action verbs, and metrics."""
    text = resume.get_all_text()
    score = 100

    if not has_bullet_points(resume):
        score -= NO_BULLETS_PENALTY
    if not has_action_verbs(text, taxonomy):
        score -= NO_ACTION_VERBS_PENALTY
    if not has_quantified_results(text):
        score -= NO_QUANTIFIED_RESULTS_PENALTY

    return clamp_score(score)


def score_length_for_word_count(word_count: int) -> int:
    """
    Piecewise length score; 400-800 words is optimal.

    Examples:
        >>> score_length_for_word_count(500)
        100
        >>> score_length_for_word_count(1500)
        90
        >>> score_length_for_word_count(100)
        30
    """
    if 400 <= word_count <= 800:
        return 100
    if 300 <= word_count < 400:
        return 80
    if 200 <= word_count < 300:
        return 60
    if 800 < word_count <= 1000:
        return 80
    if word_count > 1000:
        return clamp_score(max(40, 100 - (word_count - 1000) / 50))
    return clamp_score(max(20, (word_count / 200) * 60))


def score_length(resume: ResumeRecord) -> int:
    """Length score for the resume's total word count."""
    return score_length_for_word_count(count_words(resume.get_all_text()))


def overall_score(breakdown: ATSScoreBreakdown) -> int:
    """Weighted sum of the five sub-scores, rounded half-up."""
    weighted = sum(
        getattr(breakdown, category.value) * weight
        for category, weight in SUB_SCORE_WEIGHTS.items()
    )
    return clamp_score(weighted)
