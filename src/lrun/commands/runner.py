"""Runner commands for lrun CLI."""

import json

import typer

from librunner import UnitSystem, make_runner
from librunner.config import get_settings
from lrun import display

WEIGHT_UNITS = {UnitSystem.METRIC: "kg", UnitSystem.IMPERIAL: "lb"}
HEIGHT_UNITS = {UnitSystem.METRIC: "m", UnitSystem.IMPERIAL: "in"}


def bmi(
    weight: float = typer.Argument(..., help="Body weight in kg (metric) or lb (imperial)"),
    height: float = typer.Argument(..., help="Height in m (metric) or in (imperial)"),
    age: int = typer.Argument(..., help="Age in years"),
    unit: UnitSystem | None = typer.Option(None, "--unit", "-u", help="Unit system"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Show a runner's body mass index."""
    unit = unit or get_settings().default_unit_system

    try:
        runner = make_runner(weight, height, age, unit)
    except ValueError as e:
        display.display_error(str(e))
        raise typer.Exit(code=1) from e

    data = {
        "unit_system": unit.value,
        "weight": runner.weight,
        "weight_unit": WEIGHT_UNITS[unit],
        "height": runner.height,
        "height_unit": HEIGHT_UNITS[unit],
        "age": runner.age,
        "bmi": runner.bmi(),
    }

    if json_output:
        print(json.dumps(data, indent=2))
    else:
        display.display_bmi(data)
