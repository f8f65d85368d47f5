"""
Taxonomy Context

Responsibilities:
- Holds the canonical skill alias table, screening keyword lists, and role tables
- Resolves free-text target roles to table keys with a deterministic rule
- Loads optional YAML overrides and swaps the active taxonomy atomically

Owns: Static tables, role resolution, taxonomy reload
Never: Scores resumes or aggregates skill signals
"""

from scribe.contexts.taxonomy.registry import (
    Taxonomy,
    build_taxonomy,
    get_taxonomy,
    load_taxonomy,
    reload_taxonomy,
    set_taxonomy,
)
from scribe.contexts.taxonomy.role_resolver import resolve_role, role_entries

__all__ = [
    "Taxonomy",
    "build_taxonomy",
    "get_taxonomy",
    "load_taxonomy",
    "reload_taxonomy",
    "set_taxonomy",
    "resolve_role",
    "role_entries",
]
