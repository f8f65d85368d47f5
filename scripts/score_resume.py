#!/usr/bin/env python3
"""
Resume ATS Scoring CLI

Scores a resume file (YAML or JSON) for applicant tracking system compatibility
and prints the sub-scores, suggestions, keyword coverage, and recommendations.

Usage:
    python scripts/score_resume.py resume.yaml
    python scripts/score_resume.py resume.yaml --role "Senior Frontend Engineer"
    python scripts/score_resume.py resume.json --role backend --output report.txt
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from scribe.contexts.screening import analyze
from scribe.contexts.screening.logger import log_screening_summary, setup_screening_logger
from scribe.exceptions import ScribeError
from scribe.utils.loaders import load_resume
from scribe.utils.report_formatter import format_ats_report

load_dotenv()

app = typer.Typer(help="Score a resume for ATS compatibility.", add_completion=False)


@app.command()
def main(
    resume_file: Annotated[
        Path,
        typer.Argument(help="Resume file (YAML or JSON)"),
    ],
    role: Annotated[
        Optional[str],
        typer.Option("--role", "-r", help="Target role (e.g., 'frontend developer')"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Also write the report to this file"),
    ] = None,
):
    """
    Score a resume and print the ATS report.

    Examples:\n

        $ score_resume.py resume.yaml

        $ score_resume.py resume.yaml --role "data scientist" -o report.txt
    """
    setup_screening_logger(target_role=role)

    try:
        resume = load_resume(resume_file)
    except ScribeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    analysis = analyze(resume, role)
    report = format_ats_report(analysis, target_role=role)

    typer.echo("")
    typer.echo(report)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report + "\n", encoding="utf-8")
        typer.secho(f"\nReport written to {output}", fg=typer.colors.GREEN)

    log_screening_summary(analysis, resume_file, output)


if __name__ == "__main__":
    app()
