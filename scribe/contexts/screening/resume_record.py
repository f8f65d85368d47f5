"""
Resume record data structure for the Screening context.

ResumeRecord is the caller-owned input to analyze(). It is frozen so the engine
cannot mutate it, and from_dict() tolerates the loose shapes produced by form
builders (missing keys, None values, camelCase names).
"""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional, Sequence, Tuple


def _text(value: Any) -> str:
    """Coerce an optional field value to a string, treating None as empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _coerce_text_fields(record: Any) -> None:
    """Replace None or non-string values in the str fields of a frozen record."""
    for f in fields(record):
        if f.type in (str, "str"):
            object.__setattr__(record, f.name, _text(getattr(record, f.name)))


def _pick(data: Mapping[str, Any], *keys: str) -> str:
    """Return the first present key's value as text."""
    for key in keys:
        if data.get(key) is not None:
            return _text(data[key])
    return ""


@dataclass(frozen=True)
class ExperienceEntry:
    """
    Single work experience entry.

    Attributes:
        role: Job title
        company: Employer name
        start: Start date as written by the user
        end: End date as written by the user ("Present" etc.)
        description: Free-text description, usually bullet lines
    """

    role: str = ""
    company: str = ""
    start: str = ""
    end: str = ""
    description: str = ""

    def __post_init__(self):
        _coerce_text_fields(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ExperienceEntry":
        data = data or {}
        return cls(
            role=_pick(data, "role", "title"),
            company=_pick(data, "company"),
            start=_pick(data, "start"),
            end=_pick(data, "end"),
            description=_pick(data, "description"),
        )


@dataclass(frozen=True)
class EducationEntry:
    """Single education entry."""

    school: str = ""
    degree: str = ""
    start: str = ""
    end: str = ""

    def __post_init__(self):
        _coerce_text_fields(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "EducationEntry":
        data = data or {}
        return cls(
            school=_pick(data, "school"),
            degree=_pick(data, "degree"),
            start=_pick(data, "start"),
            end=_pick(data, "end"),
        )


def _as_entry(entry_cls: type, value: Any) -> Any:
    """Pass entries through; build one from a mapping (or None) otherwise."""
    if isinstance(value, entry_cls):
        return value
    if value is None or isinstance(value, Mapping):
        return entry_cls.from_dict(value)
    raise TypeError(f"Expected {entry_cls.__name__} or mapping, got {type(value).__name__}")


@dataclass(frozen=True)
class ResumeRecord:
    """
    Structured resume as filled in by the user.

    Attributes:
        name: Full name
        title: Professional title / headline
        email: Contact email
        phone: Contact phone number
        location: City, region
        website: Portfolio or profile URL
        summary: Professional summary paragraph
        skills: Comma-separated skills text
        experience: Work history entries, most recent first
        education: Education entries
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""
    skills: str = ""
    experience: Tuple[ExperienceEntry, ...] = field(default_factory=tuple)
    education: Tuple[EducationEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _coerce_text_fields(self)
        # Accept lists and loose mappings from callers but store tuples of entries
        object.__setattr__(
            self,
            "experience",
            tuple(_as_entry(ExperienceEntry, e) for e in self.experience or ()),
        )
        object.__setattr__(
            self,
            "education",
            tuple(_as_entry(EducationEntry, e) for e in self.education or ()),
        )

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ResumeRecord":
        """
        Build a ResumeRecord from a loose mapping.

        Missing keys and None values become empty strings or empty lists. The name
        may be given as "name", "fullName", or "full_name".

        Args:
            data: Mapping such as a parsed YAML/JSON resume or a form payload

        Returns:
            ResumeRecord instance
        """
        data = data or {}
        experience: Sequence[Any] = data.get("experience") or []
        education: Sequence[Any] = data.get("education") or []

        return cls(
            name=_pick(data, "name", "fullName", "full_name"),
            title=_pick(data, "title"),
            email=_pick(data, "email"),
            phone=_pick(data, "phone"),
            location=_pick(data, "location"),
            website=_pick(data, "website"),
            summary=_pick(data, "summary"),
            skills=_pick(data, "skills"),
            experience=tuple(ExperienceEntry.from_dict(e) for e in experience),
            education=tuple(EducationEntry.from_dict(e) for e in education),
        )

    # =========================================================================
    # PUBLIC API METHODS
    # =========================================================================

    def get_all_text(self) -> str:
        """
        Get the resume text that screening software would read.

        Order: name, title, summary, skills, then "role company description" for
        each experience entry, then "degree school" for each education entry,
        joined by single spaces. Contact details are not included.
        """
        parts = [self.name, self.title, self.summary, self.skills]
        parts.extend(f"{e.role} {e.company} {e.description}" for e in self.experience)
        parts.extend(f"{e.degree} {e.school}" for e in self.education)
        return " ".join(parts)

    def get_skill_list(self) -> list[str]:
        """Split the skills field on commas into lowercase, stripped items."""
        return [s.strip() for s in self.skills.lower().split(",")]
