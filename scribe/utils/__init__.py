"""
Shared utilities for SCRIBE.

Common functionality used across contexts:
- Logger setup with provenance
- Score rounding and clamping
- Resume and signal file loading
- Text report formatting
"""

from scribe.utils.scoring_math import clamp_score, round_half_up

__all__ = ["clamp_score", "round_half_up"]
