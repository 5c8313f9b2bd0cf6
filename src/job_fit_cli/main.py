"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import structlog
import typer
from rich.console import Console
from rich.table import Table

from job_fit_core.config.presets import available_presets, get_preset
from job_fit_core.config.settings import Settings
from job_fit_core.exceptions import JobFitError
from job_fit_core.models.result import FitResult, ScoreResult
from job_fit_engine.engine import ScoringEngine, coerce_job
from job_fit_engine.export import to_record_fields
from job_fit_engine.observability import configure_logging

app = typer.Typer(
    name="job-fit",
    help="Bidirectional job-fit scoring between a job posting and a career profile",
)
console = Console()
logger = structlog.get_logger()


def _load_json(path: Path) -> Any:  # noqa: ANN401
    """Read a JSON document, exiting with code 1 when it does not parse."""
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] {path} is not valid JSON: {e}")
        raise typer.Exit(code=1) from e


def _build_settings(preset: str | None, verbose: bool) -> Settings:
    settings = Settings()  # type: ignore[call-arg]
    if preset:
        settings.scoring_preset = preset
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _score(job_file: Path, profile_file: Path, settings: Settings) -> tuple[Any, ScoreResult]:
    """Load both documents and score them, exiting with code 1 on errors."""
    job_data = _load_json(job_file)
    profile_data = _load_json(profile_file)
    try:
        engine = ScoringEngine.from_settings(settings)
        result = asyncio.run(engine.ascore(job_data, profile_data))
    except JobFitError as e:
        logger.error("cli_scoring_failed", error=str(e), error_type=type(e).__name__)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e
    return job_data, result


def _breakdown_table(title: str, fit: FitResult) -> Table:
    table = Table(title=f"{title}: {fit.score}/50 ({fit.label.value})")
    table.add_column("Criterion", style="bold")
    table.add_column("Observed")
    table.add_column("Score", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Rationale")
    for item in fit.breakdown:
        score = f"{item.score}" if not item.missing_data else f"{item.score} [dim](no data)[/dim]"
        weight = f"{item.weight:.0%}" if item.weight is not None else "-"
        table.add_row(item.criteria, item.actual_value, score, weight, item.rationale)
    return table


@app.command()
def score(
    job_file: Path = typer.Argument(..., help="Job payload JSON file", exists=True),
    profile_file: Path = typer.Argument(..., help="User profile JSON file", exists=True),
    preset: str | None = typer.Option(None, "--preset", help="Scoring preset name"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw score as JSON"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Score one job against a user profile."""
    settings = _build_settings(preset, verbose)
    _, result = _score(job_file, profile_file, settings)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    console.print(
        f"[bold]Overall:[/bold] {result.overall_score}/100 "
        f"[bold]{result.overall_label.value}[/bold] (preset {result.preset})"
    )
    if result.deal_breaker_triggered:
        console.print(f"[red]Deal-breaker:[/red] {result.deal_breaker_triggered}")
    console.print(_breakdown_table("Job -> You", result.job_to_user_fit))
    console.print(_breakdown_table("You -> Job", result.user_to_job_fit))

    interpretation = result.interpretation
    console.print(f"\n[bold]Summary:[/bold] {interpretation.summary}")
    console.print(f"[bold]Action:[/bold] {interpretation.action}")
    if interpretation.conversation_starters:
        console.print("\n[bold]Questions to ask:[/bold]")
        for question in interpretation.conversation_starters:
            console.print(f"  - {question}")


@app.command()
def presets() -> None:
    """List scoring presets and their weight tables."""
    for name in available_presets():
        config = get_preset(name)
        table = Table(title=f"Preset {name}")
        table.add_column("Side")
        table.add_column("Criterion")
        table.add_column("Weight", justify="right")
        for side, weights in (
            ("job -> user", config.job_to_user_weights),
            ("user -> job", config.user_to_job_weights),
        ):
            for key, weight in weights.items():
                table.add_row(side, key, f"{weight:.4f}")
        console.print(table)
        console.print(
            f"[dim]skill match threshold {config.skill_match_threshold} "
            f"({config.skill_similarity} similarity), "
            f"desired skill share {config.desired_skill_share}[/dim]\n"
        )


@app.command()
def record(
    job_file: Path = typer.Argument(..., help="Job payload JSON file", exists=True),
    profile_file: Path = typer.Argument(..., help="User profile JSON file", exists=True),
    preset: str | None = typer.Option(None, "--preset", help="Scoring preset name"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the flat record-store fields for a scored job."""
    settings = _build_settings(preset, verbose)
    job_data, result = _score(job_file, profile_file, settings)
    fields = to_record_fields(coerce_job(job_data), result)
    typer.echo(json.dumps(fields, indent=2))


if __name__ == "__main__":
    app()
