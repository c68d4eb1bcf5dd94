"""Swim Barriers CLI application.

Usage:
    swimbarriers time format 83459
    swimbarriers time parse 01:23:45
    swimbarriers barriers evaluate catalog.json --time 00:47:00 --age 12 --gender F \\
        --pool 25m --style "50m Serbest"
    swimbarriers swimmer barriers <swimmer_id>
"""

import json
from pathlib import Path

import typer
from dotenv import load_dotenv

# Load .env file for Supabase keys, etc.
load_dotenv()
from pydantic import ValidationError  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markup import escape  # noqa: E402
from rich.table import Table  # noqa: E402

from swimbarriers.models.barrier import BarrierSummaryRow, BarrierValue  # noqa: E402
from swimbarriers.models.duration import (  # noqa: E402
    TimeFormatError,
    format_time,
    from_milliseconds,
    validate_time_input,
)
from swimbarriers.models.event import PoolCategory  # noqa: E402
from swimbarriers.models.swimmer import Gender  # noqa: E402
from swimbarriers.services.barrier_calculation import (  # noqa: E402
    applicable_barriers_by_name,
    best_achieved_and_next_target,
    build_barrier_summary,
    evaluate_barriers,
)

console = Console()
app = typer.Typer(
    name="swimbarriers",
    help="Swim club barrier tracking CLI",
    no_args_is_help=True,
)


def _parse_time_or_exit(text: str) -> int:
    try:
        return validate_time_input(text)
    except TimeFormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None


# =============================================================================
# TIME COMMANDS
# =============================================================================

time_app = typer.Typer(help="Time conversion commands", no_args_is_help=True)
app.add_typer(time_app, name="time")


@time_app.command("format")
def time_format(
    milliseconds: int = typer.Argument(..., min=0, help="Duration in milliseconds"),
):
    """Show milliseconds as MM:SS:cc."""
    display = from_milliseconds(milliseconds)
    console.print(str(display))


@time_app.command("parse")
def time_parse(
    text: str = typer.Argument(..., help="Time as MM:SS:cc, e.g. 01:23:45"),
):
    """Convert MM:SS:cc text to milliseconds."""
    console.print(_parse_time_or_exit(text))


# =============================================================================
# BARRIER COMMANDS
# =============================================================================

barriers_app = typer.Typer(help="Barrier evaluation commands", no_args_is_help=True)
app.add_typer(barriers_app, name="barriers")


def _load_catalog(catalog_path: Path) -> list[BarrierValue]:
    """Load a JSON list of barrier values."""
    try:
        data = json.loads(catalog_path.read_text())
        return [BarrierValue.model_validate(entry) for entry in data]
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid catalog file {catalog_path}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None


@barriers_app.command("evaluate")
def barriers_evaluate(
    catalog_path: Path = typer.Argument(..., help="JSON file with barrier values"),
    time: str = typer.Option(..., "--time", "-t", help="Swimmer's best time, MM:SS:cc"),
    age: int = typer.Option(..., "--age", "-a", help="Swimmer's age"),
    gender: Gender = typer.Option(..., "--gender", "-g", help="M or F"),
    pool: PoolCategory = typer.Option(..., "--pool", "-p", help="25m or 50m"),
    style: str = typer.Option(..., "--style", "-s", help="Swimming style name"),
):
    """Evaluate a time against a barrier catalog file (no database needed).

    Catalog entries are matched on pool and style name, so each entry needs
    ``pool_type_name`` and ``swimming_style_name``.
    """
    if not catalog_path.exists():
        console.print(f"[red]File not found: {catalog_path}[/red]")
        raise typer.Exit(1)

    swimmer_time = _parse_time_or_exit(time)
    barriers = applicable_barriers_by_name(
        age, gender, pool.value, style, _load_catalog(catalog_path)
    )

    if not barriers:
        console.print(
            f"[yellow]No barriers for age {age} {gender.value}, {pool.value} {style}[/yellow]"
        )
        raise typer.Exit(0)

    table = Table(title=f"{style} ({pool.value}) - {format_time(swimmer_time)}")
    table.add_column("Barrier", style="cyan")
    table.add_column("Time", justify="right")
    table.add_column("Difference", justify="right")
    table.add_column("Passed", justify="center")

    for result in evaluate_barriers(swimmer_time, barriers):
        table.add_row(
            result.barrier_name,
            format_time(result.barrier_time),
            f"{result.difference:+d} ms",
            "[green]yes[/green]" if result.achieved else "[red]no[/red]",
        )

    console.print(table)

    progress = best_achieved_and_next_target(swimmer_time, barriers)
    best = progress.best_passed.tier if progress.best_passed else "-"
    console.print(f"Best passed: [green]{best}[/green]")
    if progress.next_target:
        console.print(
            f"Next target: [cyan]{progress.next_target.tier}[/cyan] "
            f"({progress.next_target.time_formatted}, "
            f"{progress.time_to_next(swimmer_time)} ms to go)"
        )
    else:
        console.print("Next target: -")


# =============================================================================
# SWIMMER COMMANDS
# =============================================================================

swimmer_app = typer.Typer(help="Swimmer commands", no_args_is_help=True)
app.add_typer(swimmer_app, name="swimmer")


def _make_summary_table(title: str, rows: list[BarrierSummaryRow]) -> Table:
    table = Table(title=title)
    table.add_column("Pool", style="cyan")
    table.add_column("Style", style="cyan")
    table.add_column("Best Time", justify="right")
    table.add_column("Best Barrier", style="green")
    table.add_column("Next Barrier", style="yellow")
    table.add_column("Next Time", justify="right")
    table.add_column("To Go (ms)", justify="right")

    for row in rows:
        table.add_row(
            row.pool_type,
            row.swimming_style,
            row.best_time_formatted or "-",
            row.best_barrier_name or "-",
            row.next_barrier_name or "-",
            row.next_barrier_time_formatted or "-",
            str(row.time_to_next) if row.time_to_next is not None else "-",
        )
    return table


@swimmer_app.command("barriers")
def swimmer_barriers(
    swimmer_id: str = typer.Argument(..., help="Swimmer ID"),
):
    """Show a swimmer's barrier standing in every category."""
    from swimbarriers.dao import BarrierValueDAO, RaceRecordDAO, SwimmerDAO

    try:
        with console.status("Loading swimmer..."):
            swimmer = SwimmerDAO().get_by_id(swimmer_id)
    except RuntimeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    if swimmer is None:
        console.print(f"[red]Swimmer not found: {swimmer_id}[/red]")
        raise typer.Exit(1)

    try:
        with console.status("Loading races and barriers..."):
            records = RaceRecordDAO().find_by_swimmer(swimmer_id)
            barriers = BarrierValueDAO().find_for_swimmer(swimmer.age, swimmer.gender)
    except RuntimeError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    rows = build_barrier_summary(records, barriers)
    if not rows:
        console.print(f"[yellow]No barriers defined for {swimmer}[/yellow]")
        raise typer.Exit(0)

    console.print(
        _make_summary_table(f"{swimmer} ({swimmer.age}, {swimmer.gender.value})", rows)
    )
    console.print(f"[dim]{len(records)} races recorded[/dim]")


if __name__ == "__main__":
    app()
