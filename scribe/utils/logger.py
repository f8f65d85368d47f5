"""
Shared loguru configuration for SCRIBE sessions.

Context-specific wrappers live in contexts/{context}/logger.py and add a fixed
prefix to every message. Scripts call setup_logger() once at startup; library
code only emits messages and never configures sinks.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from scribe import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

# Console colors per level, overriding loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru with a DEBUG file sink and a colorized console sink.

    Args:
        context_name: Session identifier, used as the log file stem (e.g., "screen")
        log_dir: Directory for the log file (defaults to LOGS_PATH)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level printed to stdout

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger("screen", extra_provenance={"Target role": "frontend"})
    """
    log_dir = log_dir or LOGS_PATH
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write a provenance header (script, command, cwd, versions) to the active sinks.

    Args:
        extra_context: Additional key-value pairs to log after the standard ones
    """
    logger.info("=" * 80)
    logger.info(f"Script: {sys.argv[0]}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"SCRIBE: {__version__}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
