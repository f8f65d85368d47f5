"""
Taxonomy context logger.

Provides logging interface for the taxonomy context with automatic [taxonomy] prefix.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

CONTEXT_PREFIX = "[taxonomy]"


def _log_info(message: str) -> None:
    """Log info message with [taxonomy] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [taxonomy] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_taxonomy_loaded(source: Optional[Path], overridden_keys: list[str]) -> None:
    """Log which taxonomy became active and what the override file replaced."""
    if source is None:
        _log_debug("Using built-in taxonomy tables")
        return

    _log_info(f"Loaded taxonomy overrides from {source}")
    if overridden_keys:
        _log_info(f"  Overridden tables: {', '.join(overridden_keys)}")
