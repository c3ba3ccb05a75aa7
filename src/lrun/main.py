#!/usr/bin/env python3
"""
lrun - race pace calculator

A terminal CLI for race pace, speed and split planning.

Usage:
    lrun pace 42195 4:00:00                  # Marathon pace in min/km
    lrun pace 46112 4:00:00 -u imperial      # Marathon pace in min/mile
    lrun splits 10000 50:00 -s negative      # Negative split plan
    lrun bmi 70 1.75 35                      # Runner BMI
"""

import typer
from rich.console import Console

from librunner.config import configure_logging
from lrun import __version__
from lrun.commands import race, runner

# Create the main app
app = typer.Typer(
    name="lrun",
    help="Race pace, speed and splits from the terminal.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"lrun version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    lrun - race pace, speed and splits from the terminal.

    Distances are given in meters (metric) or yards (imperial).
    """
    configure_logging()


# Register commands directly on the app
app.command(name="pace")(race.pace)
app.command(name="splits")(race.splits)
app.command(name="bmi")(runner.bmi)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
