"""
Screening Context

Responsibilities:
- Scores a structured resume for applicant tracking system (ATS) compatibility
- Breaks the score into formatting, keywords, structure, readability, and length
- Detects concrete formatting/structure issues and turns scores into advice

Owns: ATS scoring rules, resume record model, issue checks, suggestions
Never: Reads skill assessment signals or modifies the resume
"""

from scribe.contexts.screening.analysis_data_structures import (
    ATSAnalysis,
    ATSScore,
    ATSScoreBreakdown,
    ATSSuggestion,
    KeywordEntry,
    ScoreCategory,
    Severity,
)
from scribe.contexts.screening.analyzer import analyze, calculate_ats_score
from scribe.contexts.screening.resume_record import (
    EducationEntry,
    ExperienceEntry,
    ResumeRecord,
)

__all__ = [
    # Entry points
    "analyze",
    "calculate_ats_score",
    # Input model
    "ResumeRecord",
    "ExperienceEntry",
    "EducationEntry",
    # Result model
    "ATSAnalysis",
    "ATSScore",
    "ATSScoreBreakdown",
    "ATSSuggestion",
    "KeywordEntry",
    "ScoreCategory",
    "Severity",
]
