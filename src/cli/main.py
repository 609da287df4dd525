#!/usr/bin/env python3
"""
measure - fitness measurements from the terminal

Shows values stored in base units the way the app displays them.

Usage:
    measure distance 5000                 # 5 km
    measure -s imperial distance 5000     # 3.11 mi
    measure speed 3.3333 --intent running # 5:00
    measure duration 3725 --abbreviated   # 1:02
    measure units                         # All registered units
    measure systems                       # Metric vs imperial units
"""

import logging

import typer
from rich.console import Console

from cli import __version__
from cli.commands import reference, values
from measurements import MeasurementSystem, get_settings

# Create the main app
app = typer.Typer(
    name="measure",
    help="Display fitness measurements in metric or imperial units.",
    no_args_is_help=True,
    add_completion=True,
)

# Console for output
console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"measure version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    system: MeasurementSystem | None = typer.Option(
        None, "--system", "-s", help="metric or imperial (defaults to the configured system)"
    ),
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    measure - display fitness measurements.

    Values are given in base units: meters, seconds, m/s, kg, N, hPa,
    kg/m³, °C, W and kJ.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    ctx.obj = {"system": system}


# Register commands directly on the app
app.command(name="distance")(values.distance)
app.command(name="height")(values.height)
app.command(name="speed")(values.speed)
app.command(name="duration")(values.duration)
app.command(name="power")(values.power)
app.command(name="mass")(values.mass)
app.command(name="force")(values.force)
app.command(name="energy")(values.energy)
app.command(name="temperature")(values.temperature)
app.command(name="pressure")(values.pressure)
app.command(name="density")(values.density)
app.command(name="climb-time")(values.climb_time)
app.command(name="climb-distance")(values.climb_distance)
app.command(name="latlong")(values.latlong)
app.command(name="percent")(values.percent)
app.command(name="heart-rate")(values.heart_rate)
app.command(name="units")(reference.units)
app.command(name="systems")(reference.systems)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
