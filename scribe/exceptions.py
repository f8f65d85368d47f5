"""Custom exceptions for SCRIBE.

The scoring and aggregation engines never raise for well-formed input. These
exceptions are raised only at the edges: taxonomy override files and resume/signal
input files.
"""

from pathlib import Path
from typing import Optional


class ScribeError(Exception):
    """Base class for all SCRIBE errors."""


class TaxonomyConfigError(ScribeError, ValueError):
    """
    Exception raised when a taxonomy override file cannot be applied.

    Attributes:
        message: Error description
        config_path: Path to the override file, if any
        key: Top-level taxonomy key that failed validation
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Override file: {config_path}")

        super().__init__("\n".join(parts))


class InputFileError(ScribeError, ValueError):
    """
    Exception raised when a resume or signal file is missing or malformed.

    Attributes:
        message: Error description
        input_path: Path to the offending file
        original_error: Underlying parser error, if any
    """

    def __init__(
        self,
        message: str,
        input_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.input_path = input_path
        self.original_error = original_error

        parts = [message]
        if input_path:
            parts.append(f"File: {input_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
