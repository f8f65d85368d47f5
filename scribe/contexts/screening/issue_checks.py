"""
Concrete formatting and structure issue detection.

Unlike the sub-scores, these checks return human-readable issue strings so the
user can see exactly what to fix.
"""

from typing import List

from scribe.contexts.screening.resume_record import ResumeRecord
from scribe.contexts.screening.scorer import (
    count_special_characters,
    is_valid_email,
    is_valid_phone,
)

# Experience entry field -> label used in issue text
ENTRY_FIELD_LABELS = {
    "role": "job title",
    "company": "company name",
    "description": "job description",
}


def check_formatting(resume: ResumeRecord) -> List[str]:
    """
    List formatting problems that may trip up a resume parser.

    Args:
        resume: Resume to check

    Returns:
        Issue strings in fixed order (email, phone, special characters)
    """
    issues = []

    if not is_valid_email(resume.email):
        issues.append("Invalid email format")

    if not is_valid_phone(resume.phone):
        issues.append("Phone number format may not be ATS-friendly")

    if count_special_characters(resume.get_all_text()) > 0:
        issues.append("Contains special characters that may confuse ATS systems")

    return issues


def check_structure(resume: ResumeRecord) -> List[str]:
    """
    List missing sections and incomplete experience entries.

    Experience entries are numbered from 1 in the issue text.

    Args:
        resume: Resume to check

    Returns:
        Issue strings, top-level sections first, then per-entry issues
    """
    issues = []

    if not resume.name.strip():
        issues.append("Missing full name")
    if not resume.summary.strip():
        issues.append("Missing professional summary")
    if not resume.skills.strip():
        issues.append("Missing skills section")
    if not resume.experience:
        issues.append("Missing work experience")

    for index, entry in enumerate(resume.experience, start=1):
        for field_name, label in ENTRY_FIELD_LABELS.items():
            if not getattr(entry, field_name).strip():
                issues.append(f"Experience {index}: Missing {label}")

    return issues
