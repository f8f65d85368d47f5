"""
Immutable taxonomy registry.

Freezes the tables from tables.py (optionally merged with a YAML override file)
into a single Taxonomy instance and holds the process-wide active reference.

Engines call get_taxonomy() once per invocation and use that snapshot for the whole
computation. reload_taxonomy() builds a complete new Taxonomy first and then swaps
the module-level reference in one assignment, so a computation never sees a
half-updated table.

Override file format (all keys optional):

    tech_keywords: [javascript, python, ...]          # replaces the list
    skill_aliases:                                     # replaces listed entries
      Python: [python, django, flask]
    role_requirements:
      ml engineer: [Python, Machine Learning, Docker]
"""

import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from scribe.contexts.taxonomy import tables
from scribe.contexts.taxonomy.logger import log_taxonomy_loaded
from scribe.exceptions import TaxonomyConfigError

load_dotenv()

# Override keys by shape
LIST_KEYS = (
    "tech_keywords",
    "high_importance_keywords",
    "emerging_technologies",
    "action_verbs",
)
MAPPING_KEYS = (
    "keyword_variations",
    "ats_role_keywords",
    "skill_aliases",
    "role_requirements",
    "complementary_skills",
)


@dataclass(frozen=True)
class Taxonomy:
    """
    Read-only keyword, alias, and role tables shared by both engines.

    Attributes:
        tech_keywords: Global screening keyword list (lowercase, ordered)
        high_importance_keywords: Keywords scored at importance 4
        keyword_variations: Keyword -> alternative spellings reported with it
        ats_role_keywords: Role key -> extra screening keywords (ordered, first match wins)
        action_verbs: Verbs that count as strong bullet openers
        skill_aliases: Canonical skill -> lowercase alias family (canonical included)
        role_requirements: Role key -> required canonical skills (ordered, first match wins)
        emerging_technologies: Technologies suggested to every profile
        complementary_skills: Skill -> skills that usually accompany it
    """

    tech_keywords: Tuple[str, ...]
    high_importance_keywords: FrozenSet[str]
    keyword_variations: Mapping[str, Tuple[str, ...]]
    ats_role_keywords: Mapping[str, Tuple[str, ...]]
    action_verbs: Tuple[str, ...]
    skill_aliases: Mapping[str, FrozenSet[str]]
    role_requirements: Mapping[str, Tuple[str, ...]]
    emerging_technologies: Tuple[str, ...]
    complementary_skills: Mapping[str, Tuple[str, ...]]


def _freeze_mapping(raw: Mapping[str, Any]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({str(k): tuple(str(v) for v in values) for k, values in raw.items()})


def _freeze_aliases(raw: Mapping[str, Any]) -> Mapping[str, FrozenSet[str]]:
    # The canonical name is always a member of its own alias family
    return MappingProxyType(
        {
            str(canonical): frozenset({str(canonical).lower()} | {str(v).lower() for v in variants})
            for canonical, variants in raw.items()
        }
    )


def build_taxonomy(overrides: Optional[Dict[str, Any]] = None) -> Taxonomy:
    """
    Build a Taxonomy from the built-in tables, applying optional overrides.

    List keys replace the built-in list. Mapping keys replace (or add) the listed
    entries and leave the other entries untouched.

    Args:
        overrides: Plain dict of override tables (see module docstring)

    Returns:
        New frozen Taxonomy

    Raises:
        TaxonomyConfigError: If an override key is unknown or has the wrong shape
    """
    overrides = overrides or {}
    _validate_overrides(overrides)

    lists = {
        "tech_keywords": tables.TECH_KEYWORDS,
        "high_importance_keywords": tables.HIGH_IMPORTANCE_KEYWORDS,
        "emerging_technologies": tables.EMERGING_TECHNOLOGIES,
        "action_verbs": tables.ACTION_VERBS,
    }
    mappings = {
        "keyword_variations": dict(tables.KEYWORD_VARIATIONS),
        "ats_role_keywords": dict(tables.ATS_ROLE_KEYWORDS),
        "skill_aliases": dict(tables.SKILL_ALIASES),
        "role_requirements": dict(tables.ROLE_REQUIREMENTS),
        "complementary_skills": dict(tables.COMPLEMENTARY_SKILLS),
    }

    for key, value in overrides.items():
        if key in LIST_KEYS:
            lists[key] = tuple(value)
        else:
            mappings[key].update(value)

    return Taxonomy(
        tech_keywords=tuple(k.lower() for k in lists["tech_keywords"]),
        high_importance_keywords=frozenset(k.lower() for k in lists["high_importance_keywords"]),
        keyword_variations=_freeze_mapping(mappings["keyword_variations"]),
        ats_role_keywords=_freeze_mapping(mappings["ats_role_keywords"]),
        action_verbs=tuple(v.lower() for v in lists["action_verbs"]),
        skill_aliases=_freeze_aliases(mappings["skill_aliases"]),
        role_requirements=_freeze_mapping(mappings["role_requirements"]),
        emerging_technologies=tuple(lists["emerging_technologies"]),
        complementary_skills=_freeze_mapping(mappings["complementary_skills"]),
    )


def _validate_overrides(overrides: Dict[str, Any], config_path: Optional[Path] = None) -> None:
    """Check override keys and value shapes before anything is built."""
    for key, value in overrides.items():
        if key in LIST_KEYS:
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise TaxonomyConfigError("Expected a list of strings", config_path, key)
        elif key in MAPPING_KEYS:
            if not isinstance(value, dict):
                raise TaxonomyConfigError("Expected a mapping of lists", config_path, key)
            for entry, items in value.items():
                if not isinstance(items, (list, tuple)) or not all(
                    isinstance(v, str) for v in items
                ):
                    raise TaxonomyConfigError(
                        f"Entry '{entry}' must be a list of strings", config_path, key
                    )
        else:
            valid = ", ".join(LIST_KEYS + MAPPING_KEYS)
            raise TaxonomyConfigError(
                f"Unknown taxonomy key. Must be one of: {valid}", config_path, key
            )


def load_taxonomy(config_path: Path) -> Taxonomy:
    """
    Load a YAML override file and build a Taxonomy from it.

    Args:
        config_path: Path to the override YAML file

    Returns:
        New frozen Taxonomy (the active taxonomy is not changed)

    Raises:
        TaxonomyConfigError: If the file is missing, unparsable, or has invalid keys
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise TaxonomyConfigError("Taxonomy override file not found", config_path)

    try:
        overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except Exception as e:
        raise TaxonomyConfigError(f"Could not parse taxonomy overrides: {e}", config_path) from e

    if overrides is None:
        overrides = {}
    if not isinstance(overrides, dict):
        raise TaxonomyConfigError("Override file must contain a mapping", config_path)

    _validate_overrides(overrides, config_path)
    taxonomy = build_taxonomy(overrides)
    log_taxonomy_loaded(config_path, sorted(overrides))
    return taxonomy


# =============================================================================
# ACTIVE TAXONOMY
# =============================================================================

_active_taxonomy: Optional[Taxonomy] = None


def get_taxonomy() -> Taxonomy:
    """
    Return the active taxonomy, loading it on first use.

    First use honours the SCRIBE_TAXONOMY_PATH environment variable.
    """
    if _active_taxonomy is None:
        return reload_taxonomy()
    return _active_taxonomy


def reload_taxonomy(config_path: Optional[Path] = None) -> Taxonomy:
    """
    Rebuild the active taxonomy and swap it in.

    Args:
        config_path: Override YAML file. Falls back to SCRIBE_TAXONOMY_PATH, then to
            the built-in tables.

    Returns:
        The newly active Taxonomy
    """
    global _active_taxonomy

    if config_path is None and os.getenv("SCRIBE_TAXONOMY_PATH"):
        config_path = Path(os.getenv("SCRIBE_TAXONOMY_PATH"))

    if config_path is None:
        taxonomy = build_taxonomy()
        log_taxonomy_loaded(None, [])
    else:
        taxonomy = load_taxonomy(config_path)

    _active_taxonomy = taxonomy
    return taxonomy


def set_taxonomy(taxonomy: Taxonomy) -> Taxonomy:
    """
    Swap in an already-built Taxonomy and return the one it replaced.

    Args:
        taxonomy: Taxonomy to activate

    Returns:
        Previously active Taxonomy (built-in tables if none was active yet)
    """
    global _active_taxonomy

    previous = _active_taxonomy if _active_taxonomy is not None else build_taxonomy()
    _active_taxonomy = taxonomy
    return previous
