"""CLI entry point for Shortlister."""

import json
import logging
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv

# Load environment variables from .env.local
load_dotenv(Path.cwd() / ".env.local")

import typer  # noqa: E402
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.logging import RichHandler  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.panel import Panel  # noqa: E402
from rich.table import Table  # noqa: E402

from shortlister.config import get_settings  # noqa: E402
from shortlister.exceptions import CriteriaValidationError, RepositoryError  # noqa: E402
from shortlister.models.application import Application  # noqa: E402
from shortlister.models.criteria import Criteria  # noqa: E402
from shortlister.output.markdown import (  # noqa: E402
    format_criteria,
    format_score,
    format_shortlisting_result,
    save_markdown,
)
from shortlister.repositories import get_json_repositories  # noqa: E402
from shortlister.scoring.engine import score_applicant  # noqa: E402
from shortlister.shortlisting.controller import ShortlistingController  # noqa: E402
from shortlister.shortlisting.models import ShortlistingResult  # noqa: E402

app = typer.Typer(
    name="shortlister",
    help="Shortlister - weighted candidate scoring and auto-shortlisting",
    add_completion=False,
)
criteria_app = typer.Typer(help="Show or save shortlisting criteria")
app.add_typer(criteria_app, name="criteria")
console = Console()

DataDirOption = Annotated[
    Path | None,
    typer.Option("--data-dir", "-d", help="Directory holding the JSON stores"),
]
JobOption = Annotated[
    str | None,
    typer.Option("--job", "-j", help="Job id (omit for the global default)"),
]


@app.callback()
def configure_logging(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Configure logging from settings."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def read_json_file(path: Path) -> Any:
    """Read a JSON file, exiting with an error message if it cannot be read."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {escape(str(e))}")
        raise typer.Exit(1) from e


def load_criteria_file(path: Path) -> Criteria:
    """Load criteria from a JSON file."""
    try:
        return Criteria.model_validate(read_json_file(path))
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid criteria in {path}:\n{escape(str(e))}")
        raise typer.Exit(1) from e


def print_result(result: ShortlistingResult) -> None:
    """Print the ranked outcome of a shortlisting run."""
    table = Table(title=f"Job {result.job_id}")
    table.add_column("#", justify="right")
    table.add_column("Applicant")
    table.add_column("Edu", justify="right")
    table.add_column("Exp", justify="right")
    table.add_column("Skills", justify="right")
    table.add_column("Certs", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Status change")

    for rank, update in enumerate(result.ranked, start=1):
        points = update.breakdown.to_breakdown()
        color = "green" if update.score >= result.threshold else "yellow"
        change = update.status_change
        table.add_row(
            str(rank),
            update.applicant_name or update.id,
            *(str(value) for value in points.values()),
            f"[{color}]{update.score}[/{color}]",
            f"{change.from_status} -> {change.to_status}" if change else "",
        )
    console.print(table)
    console.print(
        f"[bold]{len(result.updates)}[/bold] scored, "
        f"[bold]{len(result.shortlisted_ids)}[/bold] shortlisted automatically"
    )


@criteria_app.command("show")
def criteria_show(job: JobOption = None, data_dir: DataDirOption = None) -> None:
    """Show the criteria in effect for a job."""
    criteria_store, _ = get_json_repositories(data_dir or get_settings().data_dir)
    criteria = criteria_store.get(job)
    source = "stored"
    if criteria is None:
        criteria = Criteria.default()
        source = "built-in default"

    title = f"Criteria for job {job}" if job else "Default criteria"
    console.print(
        Panel(format_criteria(criteria), title=f"{title} ({source})", border_style="blue")
    )


@criteria_app.command("set")
def criteria_set(
    criteria_file: Annotated[Path, typer.Argument(help="Path to criteria JSON")],
    job: JobOption = None,
    data_dir: DataDirOption = None,
) -> None:
    """Validate and save criteria for a job (or as the global default)."""
    criteria = load_criteria_file(criteria_file)
    criteria_store, _ = get_json_repositories(data_dir or get_settings().data_dir)

    try:
        criteria_store.save(criteria, job)
    except (CriteriaValidationError, RepositoryError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    console.print("[green]Shortlisting criteria saved[/green]")


@app.command()
def score(
    application_file: Annotated[Path, typer.Argument(help="Path to an application JSON")],
    criteria_file: Annotated[
        Path | None,
        typer.Option("--criteria", "-c", help="Criteria JSON (defaults to the stored criteria)"),
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Score a single application without saving anything."""
    try:
        application = Application.model_validate(read_json_file(application_file))
    except ValidationError as e:
        console.print(
            f"[red]Error:[/red] Invalid application in {application_file}:\n{escape(str(e))}"
        )
        raise typer.Exit(1) from e

    if criteria_file is not None:
        criteria = load_criteria_file(criteria_file)
    else:
        criteria_store, _ = get_json_repositories(data_dir or get_settings().data_dir)
        criteria = criteria_store.get(application.job_id) or Criteria.default()

    result = score_applicant(application, criteria)
    console.print(
        Panel(format_score(result), title=application.applicant_name, border_style="blue")
    )


@app.command()
def shortlist(
    job_id: Annotated[str, typer.Argument(help="Job to shortlist")],
    criteria_file: Annotated[
        Path | None,
        typer.Option(
            "--criteria",
            "-c",
            help="Use these criteria without saving them (weights may not sum to 100)",
        ),
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write a Markdown report here")
    ] = None,
    data_dir: DataDirOption = None,
) -> None:
    """Score a job's applicants and auto-shortlist those at or above the threshold."""
    settings = get_settings()
    criteria_store, applications = get_json_repositories(data_dir or settings.data_dir)
    controller = ShortlistingController(
        applications,
        criteria_store=criteria_store,
        threshold=settings.auto_shortlist_threshold,
    )

    criteria = load_criteria_file(criteria_file) if criteria_file else None
    if criteria is None:
        criteria = controller.resolve_criteria(job_id)

    try:
        result = controller.run(job_id, criteria)
    except RepositoryError as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if not result.updates and not result.errors:
        console.print("[yellow]No applications found for this job.[/yellow]")
    else:
        print_result(result)

    if output is not None:
        save_markdown(format_shortlisting_result(result, criteria), output)
        console.print(f"\n[green]Report saved to:[/green] {output}")

    if result.has_errors:
        console.print("[red]Errors occurred:[/red]")
        for error in result.errors:
            console.print(f"  - {error.id} ({error.stage}): {escape(error.message)}")
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    from shortlister import __version__

    console.print(f"Shortlister v{__version__}")


if __name__ == "__main__":
    app()
