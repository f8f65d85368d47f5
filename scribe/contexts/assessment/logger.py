"""
Assessment context logger.

Provides logging interface for the assessment context with automatic [assess] prefix.
All assessment modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[assess]"


def setup_assessment_logger(log_dir: Optional[Path] = None, signals_file: Optional[Path] = None) -> Path:
    """
    Setup logger for an assessment session.

    Args:
        log_dir: Directory for this session (defaults to LOGS_PATH)
        signals_file: Signal file recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="assess",
        log_dir=log_dir,
        extra_provenance={"Signals": str(signals_file) if signals_file else "(in memory)"},
    )


# Wrapper functions with automatic [assess] prefix


def _log_info(message: str) -> None:
    """Log info message with [assess] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [assess] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level assessment helpers


def log_deduplication(received: int, kept: int) -> None:
    """Log how many assessments survived deduplication."""
    if received != kept:
        _log_debug(f"Deduplicated {received} assessments into {kept} skills")
    else:
        _log_debug(f"{kept} assessments, no duplicates")


def log_proficiency(skill: str, related_count: int, average: Optional[float], level) -> None:
    """Log a proficiency estimate for one skill."""
    if average is None:
        _log_debug(f"No assessments related to '{skill}'")
    else:
        _log_debug(
            f"'{skill}': {related_count} related assessments, "
            f"weighted average {average:.2f} -> {level.value}"
        )


def log_recommendations(target_role: Optional[str], recommendations) -> None:
    """Log the size of each recommendation list."""
    _log_debug(
        f"Recommendations for '{target_role or '(no role)'}': "
        f"{len(recommendations.missing)} missing, {len(recommendations.emerging)} emerging, "
        f"{len(recommendations.complementary)} complementary"
    )


def log_profile_result(profile, suggestions) -> None:
    """
    Log a summary of a built skill profile.

    Args:
        profile: Deduplicated assessments
        suggestions: Skill names suggested for the resume
    """
    verified = sum(1 for a in profile if a.verified)
    _log_info(f"Profile: {len(profile)} skills ({verified} verified), {len(suggestions)} suggested for resume")
    for assessment in profile:
        _log_debug(f"  {assessment.skill}: {assessment.level.value} via {assessment.source.value}")
