"""
Skill alias resolution.

Free-text skill names ("js", "ReactJS", "Postgresql") are matched against the
taxonomy's alias table: canonical skill -> family of lowercase variants, where the
canonical name itself is always a member of its family. All comparisons ignore
case and surrounding whitespace.

Examples:
    >>> resolve_canonical("ES6")
    'JavaScript'
    >>> is_related("reactjs", "React")
    True
    >>> is_related("Python", "Java")
    False
"""

from typing import List, Optional

from scribe.contexts.taxonomy import Taxonomy, get_taxonomy


def _normalize(name: str) -> str:
    return (name or "").strip().lower()


def resolve_canonical(name: str, taxonomy: Optional[Taxonomy] = None) -> Optional[str]:
    """
    Resolve a free-text skill name to its canonical skill.

    An exact (case-insensitive) canonical name wins; otherwise the first canonical
    entry, in table order, whose alias family contains the name.

    Args:
        name: Skill name as reported
        taxonomy: Taxonomy snapshot (defaults to the active taxonomy)

    Returns:
        Canonical skill name, or None if the name is not in the alias table
    """
    taxonomy = taxonomy or get_taxonomy()
    needle = _normalize(name)
    if not needle:
        return None

    for canonical in taxonomy.skill_aliases:
        if canonical.lower() == needle:
            return canonical

    for canonical, family in taxonomy.skill_aliases.items():
        if needle in family:
            return canonical

    return None


def canonical_key(name: str, taxonomy: Optional[Taxonomy] = None) -> str:
    """Grouping key for a skill: its canonical name, or the normalized raw name."""
    return resolve_canonical(name, taxonomy) or _normalize(name)


def is_related(skill_a: str, skill_b: str, taxonomy: Optional[Taxonomy] = None) -> bool:
    """
    True if two skill names are equal ignoring case, or share an alias family.

    Args:
        skill_a: First skill name
        skill_b: Second skill name
        taxonomy: Taxonomy snapshot (defaults to the active taxonomy)
    """
    a, b = _normalize(skill_a), _normalize(skill_b)
    if a == b:
        return True

    taxonomy = taxonomy or get_taxonomy()
    return any(a in family and b in family for family in taxonomy.skill_aliases.values())


def related_skills(name: str, taxonomy: Optional[Taxonomy] = None) -> List[str]:
    """Return [canonical] for a recognised skill name, else []."""
    canonical = resolve_canonical(name, taxonomy)
    return [canonical] if canonical else []
