"""Race commands for lrun CLI."""

import json
from enum import Enum
from typing import Any

import typer

from librunner import (
    Duration,
    PreconditionError,
    Race,
    Running,
    UnitSystem,
    format_distance,
    format_duration,
    format_pace,
    format_speed,
    make_race,
    parse_duration,
)
from librunner.config import get_settings
from lrun import display


class SplitStrategy(str, Enum):
    """How pace is distributed over the splits of a race."""

    EVEN = "even"
    NEGATIVE = "negative"
    POSITIVE = "positive"


def build(distance: int, duration: str, unit: UnitSystem | None) -> tuple[Race, Running]:
    """Build a race and a running from CLI arguments, exiting on invalid input."""
    try:
        race = make_race(distance, unit or get_settings().default_unit_system)
        running = Running(duration=parse_duration(duration))
    except ValueError as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e
    return race, running


def summarize(race: Race, running: Running) -> dict[str, Any]:
    """Compute pace and speed of a running over a race."""
    units = race.units
    return {
        "unit_system": units.value,
        "distance": race.distance,
        "base_unit": units.base_unit,
        "distance_display": format_distance(race.display_distance(), units),
        "distance_label": units.distance_label,
        "duration": format_duration(running.duration),
        "average_pace": format_pace(running.average_pace(race)),
        "speed": running.speed(race),
        "speed_display": format_speed(running.display_speed(race), units),
        "num_splits": race.num_splits(),
    }


def pace(
    distance: int = typer.Argument(..., help="Distance in meters (metric) or yards (imperial)"),
    duration: str = typer.Argument(..., help="Duration as HH:MM:SS, MM:SS or seconds"),
    unit: UnitSystem | None = typer.Option(None, "--unit", "-u", help="Unit system"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show average pace and speed for a race."""
    race, running = build(distance, duration, unit)

    try:
        data = summarize(race, running)
    except PreconditionError as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        print(json.dumps(data, indent=2))
    else:
        display.display_race_summary(data)


def splits(
    distance: int = typer.Argument(..., help="Distance in meters (metric) or yards (imperial)"),
    duration: str = typer.Argument(..., help="Duration as HH:MM:SS, MM:SS or seconds"),
    unit: UnitSystem | None = typer.Option(None, "--unit", "-u", help="Unit system"),
    strategy: SplitStrategy = typer.Option(
        SplitStrategy.EVEN, "--strategy", "-s", help="Pace distribution"
    ),
    degree: int | None = typer.Option(
        None, "--degree", "-d", help="Seconds of variation for negative/positive splits"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show per-kilometer or per-mile splits for a race."""
    race, running = build(distance, duration, unit)
    if degree is None:
        degree = get_settings().negative_split_degree

    try:
        if strategy == SplitStrategy.NEGATIVE:
            paces = running.negative_splits(race, degree)
        elif strategy == SplitStrategy.POSITIVE:
            paces = running.positive_splits(race, degree)
        else:
            paces = running.splits(race)
    except PreconditionError as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e

    elapsed = Duration(total_seconds=0)
    rows = []
    for split in paces:
        elapsed = elapsed + split
        rows.append({"pace": format_pace(split), "elapsed": format_duration(elapsed)})

    data = {"strategy": strategy.value, "unit_system": race.units.value, "splits": rows}

    if json_output:
        print(json.dumps(data, indent=2))
    else:
        display.display_splits(data)
