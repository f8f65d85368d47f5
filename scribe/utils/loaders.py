"""
Resume and skill-signal file loading.

Both loaders accept YAML or JSON (JSON is read through the same YAML parser) and
return the engines' input types. The engines themselves never touch files.

Resume file:

    name: Ada Lovelace
    email: ada@example.com
    skills: Python, SQL, Git
    experience:
      - role: Engineer
        company: Analytical Engines Ltd
        description: "Built ..."

Signal file:

    quiz_results:
      - {topic: JavaScript, score: 85, completed_at: "2024-03-01T10:00:00"}
    practice:
      - {problem_id: p1, topics: [Arrays], solved: true}
    projects:
      - {name: Portfolio, technologies: [React, TypeScript]}
    manual:
      - {skill: Docker, level: intermediate}
"""

from pathlib import Path
from typing import Any, Dict, Union

from omegaconf import OmegaConf

from scribe.contexts.assessment import SkillSignals
from scribe.contexts.screening import ResumeRecord
from scribe.exceptions import InputFileError


def load_mapping(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML/JSON file whose top level is a mapping.

    Args:
        path: File to load

    Returns:
        Plain dict; "${...}" strings are returned as written

    Raises:
        InputFileError: If the file is missing, unparsable, or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise InputFileError("Input file not found", path)

    try:
        data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    except Exception as e:
        # YAML scanner errors, OmegaConf errors, and decoding errors all end up here
        raise InputFileError("Could not parse input file", path, e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InputFileError(f"Expected a mapping at top level, got {type(data).__name__}", path)
    return data


def load_resume(path: Union[str, Path]) -> ResumeRecord:
    """
    Load a resume file into a ResumeRecord.

    Raises:
        InputFileError: If the file cannot be read or parsed
    """
    return ResumeRecord.from_dict(load_mapping(path))


def load_signals(path: Union[str, Path]) -> SkillSignals:
    """
    Load a signal file into SkillSignals.

    Raises:
        InputFileError: If the file cannot be read or parsed, or states an unknown level
    """
    path = Path(path)
    data = load_mapping(path)
    try:
        return SkillSignals.from_dict(data)
    except (ValueError, TypeError, AttributeError) as e:
        raise InputFileError("Malformed skill signals", path, e) from e
