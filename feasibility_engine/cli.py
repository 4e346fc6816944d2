"""
Feasibility engine — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load inputs (question bank, responses).
  4. Execute action (score, list, validate).
  5. Report result to stdout.

Install and run::

    pip install -e .
    feasibility-engine --help
    feasibility-engine validate-config
    feasibility-engine list-questions --domain security
    feasibility-engine score --responses answers.json
    feasibility-engine score --responses answers.csv --format json --output out/score.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="feasibility-engine",
    help="AI adoption feasibility scoring — questionnaire answers to readiness score.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from feasibility_engine.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config; ``debug`` turns on the engine's per-domain DEBUG lines."""
    from feasibility_engine.utils.logging import configure_logging
    configure_logging(config.logging, debug=config.debug)


def _load_questions_or_exit(config, questions_path: Optional[str]):
    """Load the question bank from ``--questions`` or the configured default."""
    from feasibility_engine.config import resolve_path
    from feasibility_engine.questions.bank import load_question_bank

    path = Path(questions_path) if questions_path else resolve_path(
        config.data.question_bank_file
    )
    try:
        return load_question_bank(path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] Question bank: {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Question bank:    {config.data.question_bank_file}")
    typer.echo(f"  Output dir:       {config.data.output_dir}")
    typer.echo(f"  Report format:    {config.report.default_format}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("list-questions")
def list_questions(
    domain: Optional[str] = typer.Option(
        None,
        "--domain",
        "-d",
        help="Only show questions for this domain (e.g. security).",
    ),
    questions_path: Optional[str] = typer.Option(
        None,
        "--questions",
        help="Question bank JSON file (default: config data.question_bank_file).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """List the questions in the question bank, grouped by section."""
    from feasibility_engine.questions.bank import (
        list_sections,
        questions_by_domain,
        questions_by_section,
    )
    from feasibility_engine.reporting.formatters import format_question_list
    from feasibility_engine.taxonomy.domain_taxonomy import ScoreDomain

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    questions = _load_questions_or_exit(config, questions_path)

    if domain:
        try:
            selected = ScoreDomain(domain.lower())
        except ValueError:
            valid = ", ".join(d.value for d in ScoreDomain)
            typer.echo(f"[ERROR] Unknown domain '{domain}'. Valid: {valid}", err=True)
            raise typer.Exit(code=1)
        questions = questions_by_domain(questions, selected)

    for section in list_sections(questions):
        typer.echo("")
        typer.echo(f"[{section or 'Unsectioned'}]")
        typer.echo(format_question_list(questions_by_section(questions, section)))

    typer.echo("")
    typer.echo(f"{len(questions)} question(s).")


@app.command("score")
def score(
    responses_path: str = typer.Option(
        ...,
        "--responses",
        "-r",
        help="Responses file (.json or .csv).",
    ),
    questions_path: Optional[str] = typer.Option(
        None,
        "--questions",
        help="Question bank JSON file (default: config data.question_bank_file).",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text or json (default: config report.default_format).",
    ),
    output_path: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the full result as JSON here (relative paths go under data.output_dir).",
    ),
    csv_path: Optional[str] = typer.Option(
        None,
        "--csv",
        help="Write a flat per-domain CSV here (relative paths go under data.output_dir).",
    ),
    max_items: Optional[int] = typer.Option(
        None,
        "--max-items",
        help="Show at most N items per guidance list in text output (0 = all).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score a set of questionnaire responses.

    \b
    Prints the overall score, rating, per-domain pass/fail table and the
    merged recommendation and remediation lists (weakest domain first).
    Unanswered questions simply score zero.
    """
    from feasibility_engine.config import resolve_output_path
    from feasibility_engine.ingestion.response_file import load_responses
    from feasibility_engine.reporting.export import (
        DOMAIN_EXPORT_FIELDS,
        export_to_csv,
        export_to_json,
        feasibility_score_to_dict,
        flatten_domain_scores_for_export,
    )
    from feasibility_engine.reporting.formatters import format_feasibility_report
    from feasibility_engine.scoring.engine import calculate_feasibility_score

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    fmt = (output_format or config.report.default_format).lower()
    if fmt not in ("text", "json"):
        typer.echo(f"[ERROR] Unsupported format '{fmt}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    questions = _load_questions_or_exit(config, questions_path)

    try:
        responses = load_responses(Path(responses_path))
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"[ERROR] Responses: {exc}", err=True)
        raise typer.Exit(code=1)

    result = calculate_feasibility_score(responses, questions)
    payload = feasibility_score_to_dict(result)

    if fmt == "json":
        typer.echo(json.dumps(payload, indent=2))
    else:
        limit = max_items if max_items is not None else config.report.max_guidance_items
        typer.echo(format_feasibility_report(result, max_items=limit))

    if output_path:
        written = export_to_json(payload, resolve_output_path(config, output_path))
        typer.echo(f"[OK] Result written to {written}", err=True)

    if csv_path:
        written = export_to_csv(
            flatten_domain_scores_for_export(result),
            resolve_output_path(config, csv_path),
            fieldnames=DOMAIN_EXPORT_FIELDS,
        )
        typer.echo(f"[OK] Domain CSV written to {written}", err=True)


if __name__ == "__main__":
    app()
