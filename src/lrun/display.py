"""Display utilities for lrun CLI with Rich formatting."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


def display_race_summary(data: dict[str, Any]) -> None:
    """Display distance, duration, pace and speed of a running."""
    table = Table(title="Race Summary", show_header=True, border_style="cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Distance", f"{data['distance']} {data['base_unit']} ({data['distance_display']})")
    table.add_row("Duration", data["duration"])
    table.add_row("Average Pace", f"{data['average_pace']} /{data['distance_label']}")
    table.add_row("Speed", data["speed_display"])
    table.add_row("Splits", str(data["num_splits"]))

    console.print(table)


def display_splits(data: dict[str, Any]) -> None:
    """Display per-split paces with cumulative elapsed time."""
    splits = data.get("splits", [])

    table = Table(
        title=f"{data['strategy'].capitalize()} Splits ({len(splits)})",
        show_header=True,
        border_style="cyan",
    )
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Pace", justify="right", style="yellow")
    table.add_column("Elapsed", justify="right", style="green")

    for index, split in enumerate(splits, start=1):
        table.add_row(str(index), split["pace"], split["elapsed"])

    console.print(table)


def display_bmi(data: dict[str, Any]) -> None:
    """Display a runner's BMI."""
    console.print(
        Panel(
            f"[bold]BMI:[/bold] [bold green]{data['bmi']:.1f}[/bold green]\n"
            f"[dim]{data['weight']} {data['weight_unit']}, "
            f"{data['height']} {data['height_unit']}, {data['age']} years[/dim]",
            title="[bold cyan]lrun[/bold cyan]",
            border_style="cyan",
        )
    )


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {escape(message)}")
