#!/usr/bin/env python3
"""
Skill Profile CLI

Reconciles quiz, practice, project, and self-reported skill signals from one file
into a deduplicated profile, then prints resume skill suggestions and a gap
analysis for an optional target role.

Usage:
    python scripts/skill_profile.py signals.yaml
    python scripts/skill_profile.py signals.yaml --role "frontend developer"
    python scripts/skill_profile.py signals.yaml --skill JavaScript
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from scribe.contexts.assessment import (
    deduplicate_assessments,
    generate_skill_recommendations,
    get_skill_proficiency_level,
    normalize_signals,
    suggest_skills_for_resume,
)
from scribe.contexts.assessment.logger import log_profile_result, setup_assessment_logger
from scribe.exceptions import ScribeError
from scribe.utils.loaders import load_signals
from scribe.utils.report_formatter import format_skill_report

load_dotenv()

app = typer.Typer(help="Build a skill profile from activity signals.", add_completion=False)


@app.command()
def main(
    signals_file: Annotated[
        Path,
        typer.Argument(help="Signal file (YAML or JSON) with quiz_results, practice, projects, manual"),
    ],
    role: Annotated[
        Optional[str],
        typer.Option("--role", "-r", help="Target role for suggestions and gap analysis"),
    ] = None,
    skill: Annotated[
        Optional[str],
        typer.Option("--skill", "-s", help="Also estimate proficiency in this skill"),
    ] = None,
):
    """
    Print the skill profile, resume suggestions, and recommendations.

    Examples:\n

        $ skill_profile.py signals.yaml --role "backend developer"

        $ skill_profile.py signals.yaml --skill js
    """
    setup_assessment_logger(signals_file=signals_file)

    try:
        signals = load_signals(signals_file)
    except ScribeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    assessments = normalize_signals(
        quiz_results=signals.quiz_results,
        practice=signals.practice,
        projects=signals.projects,
        manual=signals.manual,
    )
    profile = deduplicate_assessments(assessments)
    suggestions = suggest_skills_for_resume(profile, role)
    recommendations = generate_skill_recommendations([a.skill for a in profile], role)

    proficiency = None
    if skill:
        # Every raw signal counts toward proficiency, not only the deduplicated winner
        proficiency = (skill, get_skill_proficiency_level(skill, assessments))

    log_profile_result(profile, suggestions)

    typer.echo("")
    typer.echo(format_skill_report(profile, suggestions, recommendations, proficiency))


if __name__ == "__main__":
    app()
