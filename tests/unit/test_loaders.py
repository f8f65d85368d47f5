"""Unit tests for resume and signal file loading."""

import pytest

from scribe.contexts.assessment import ProficiencyLevel
from scribe.exceptions import InputFileError, ScribeError
from scribe.utils.loaders import load_mapping, load_resume, load_signals


@pytest.mark.unit
def test_load_resume_yaml(tmp_path):
    path = tmp_path / "resume.yaml"
    path.write_text(
        "name: Ada Lovelace\n"
        "skills: Python, SQL\n"
        "experience:\n"
        "  - title: Engineer\n"
        "    company: Acme\n"
    )
    resume = load_resume(path)

    assert resume.name == "Ada Lovelace"
    assert resume.experience[0].role == "Engineer"


@pytest.mark.unit
def test_load_resume_json(tmp_path):
    path = tmp_path / "resume.json"
    path.write_text('{"fullName": "Ada Lovelace", "email": null, "experience": []}')
    resume = load_resume(path)

    assert resume.name == "Ada Lovelace"
    assert resume.email == ""


@pytest.mark.unit
def test_empty_file_is_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_mapping(path) == {}


@pytest.mark.unit
def test_missing_file(tmp_path):
    with pytest.raises(InputFileError) as exc_info:
        load_resume(tmp_path / "missing.yaml")
    assert exc_info.value.input_path == tmp_path / "missing.yaml"


@pytest.mark.unit
def test_unparsable_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("name: [unclosed\n")
    with pytest.raises(InputFileError) as exc_info:
        load_resume(path)
    assert exc_info.value.original_error is not None


@pytest.mark.unit
def test_top_level_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(InputFileError):
        load_signals(path)


@pytest.mark.unit
def test_load_signals(tmp_path):
    path = tmp_path / "signals.yaml"
    path.write_text(
        "quiz_results:\n"
        "  - {topic: React, score: 91}\n"
        "manual:\n"
        "  - {skill: Docker, level: advanced}\n"
    )
    signals = load_signals(path)

    assert signals.quiz_results[0].score == 91
    assert signals.manual[0].level is ProficiencyLevel.ADVANCED
    assert signals.projects == ()


@pytest.mark.unit
def test_unknown_level_in_signals(tmp_path):
    path = tmp_path / "signals.yaml"
    path.write_text("manual:\n  - {skill: Docker, level: wizard}\n")
    with pytest.raises(ScribeError):
        load_signals(path)


@pytest.mark.unit
def test_interpolation_syntax_is_literal(tmp_path):
    """Resume text that looks like an OmegaConf interpolation is kept verbatim."""
    path = tmp_path / "resume.yaml"
    path.write_text('name: Ada\nsummary: "Cut spend by ${budget} and ${name}"\n')

    resume = load_resume(path)

    assert resume.summary == "Cut spend by ${budget} and ${name}"


@pytest.mark.unit
@pytest.mark.parametrize("value", [".nan", ".inf", "-.inf"])
def test_non_finite_quiz_score(tmp_path, value):
    path = tmp_path / "signals.yaml"
    path.write_text(f"quiz_results:\n  - {{topic: React, score: {value}}}\n")
    with pytest.raises(InputFileError):
        load_signals(path)
