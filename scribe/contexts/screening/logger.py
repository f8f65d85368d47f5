"""
Screening context logger.

Provides logging interface for the screening context with automatic [screen] prefix.
All screening modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[screen]"


def setup_screening_logger(log_dir: Optional[Path] = None, target_role: Optional[str] = None) -> Path:
    """
    Setup logger for a screening session.

    Args:
        log_dir: Directory for this session (defaults to LOGS_PATH)
        target_role: Target role recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="screen",
        log_dir=log_dir,
        extra_provenance={"Target role": target_role or "(none)"},
    )


# Wrapper functions with automatic [screen] prefix


def _log_info(message: str) -> None:
    """Log info message with [screen] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [screen] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [screen] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [screen] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level screening helpers


def log_role_resolution(target_role: Optional[str], matched_key: Optional[str]) -> None:
    """Log how the target role mapped onto the role keyword table."""
    if not target_role:
        return
    if matched_key is None:
        _log_debug(f"No role keywords for '{target_role}', scoring role-agnostic")
    else:
        _log_debug(f"Target role '{target_role}' matched '{matched_key}'")


def log_analysis_result(analysis) -> None:
    """
    Log the outcome of analyze().

    Args:
        analysis: ATSAnalysis returned by analyze()
    """
    score = analysis.score
    b = score.breakdown
    _log_debug(
        f"Sub-scores: formatting={b.formatting} keywords={b.keywords} "
        f"structure={b.structure} readability={b.readability} length={b.length}"
    )
    verdict = "passes" if score.passes_ats else "does not pass"
    _log_debug(f"Overall {score.overall}/100 ({verdict} ATS screening)")
    if analysis.format_issues or analysis.structure_issues:
        _log_debug(
            f"Issues: {len(analysis.format_issues)} formatting, "
            f"{len(analysis.structure_issues)} structure"
        )


def log_screening_summary(analysis, resume_file: Path, output: Optional[Path] = None) -> None:
    """
    Log the session-level outcome of scoring one resume file.

    Args:
        analysis: ATSAnalysis returned by analyze()
        resume_file: Resume file that was scored
        output: Report file, if one was written
    """
    score = analysis.score
    if score.passes_ats:
        _log_success(f"{resume_file.name}: {score.overall}/100, passes ATS screening")
    else:
        _log_warning(f"{resume_file.name}: {score.overall}/100, below the passing score")
    if output:
        _log_info(f"Report written to {output}")
