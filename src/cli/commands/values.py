"""Value display commands for measure CLI."""

import typer

from cli import display
from measurements import (
    DisplayIntent,
    MeasurementSystem,
    SpeedDisplayKind,
    abbreviated_duration_display_string,
    current_measurement_system,
    density_display_string,
    distance_display_string,
    duration_display_string,
    elevation_distance_display_string,
    elevation_time_display_string,
    energy_display_string,
    force_display_string,
    heart_rate_display_string,
    height_display_string,
    lat_long_display_string,
    mass_display_string,
    percent_display_string,
    power_display_string,
    pressure_display_string,
    speed_display_string,
    temperature_display_string,
)

JSON_HELP = "Output raw JSON"


def _system(ctx: typer.Context) -> MeasurementSystem:
    """System chosen with --system, otherwise the configured one."""
    selected: MeasurementSystem | None = (ctx.obj or {}).get("system")
    return selected if selected is not None else current_measurement_system()


def distance(
    ctx: typer.Context,
    meters: float = typer.Argument(..., help="Distance in meters"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a distance."""
    system = _system(ctx)
    display.display_value("distance", meters, distance_display_string(meters, system), system, json_output)


def height(
    ctx: typer.Context,
    meters: float = typer.Argument(..., help="Height in meters"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a height."""
    system = _system(ctx)
    display.display_value("height", meters, height_display_string(meters, system), system, json_output)


def speed(
    ctx: typer.Context,
    meters_per_second: float = typer.Argument(..., help="Speed in meters per second"),
    intent: SpeedDisplayKind = typer.Option(
        SpeedDisplayKind.NATURAL, "--intent", "-i", help="natural, running or rowing"
    ),
    digits: int = typer.Option(1, "--digits", "-d", help="Decimals for natural speeds"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a speed or a running/rowing pace."""
    system = _system(ctx)
    try:
        if intent == SpeedDisplayKind.NATURAL:
            display_intent = DisplayIntent.natural(digits)
        else:
            display_intent = DisplayIntent(kind=intent)
    except ValueError as e:
        display.display_error(f"Invalid display intent: {e}")
        raise typer.Exit(1) from e

    text = speed_display_string(meters_per_second, display_intent, system)
    display.display_value("speed", meters_per_second, text, system, json_output)


def duration(
    ctx: typer.Context,
    seconds: float = typer.Argument(..., help="Duration in seconds"),
    abbreviated: bool = typer.Option(False, "--abbreviated", "-a", help="Positional layout"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a duration."""
    system = _system(ctx)
    if abbreviated:
        text = abbreviated_duration_display_string(seconds)
    else:
        text = duration_display_string(seconds)
    display.display_value("duration", seconds, text, system, json_output)


def power(
    ctx: typer.Context,
    watts: float = typer.Argument(..., help="Power in watts"),
    with_unit: bool = typer.Option(True, "--unit/--no-unit", help="Append the unit"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show power."""
    system = _system(ctx)
    display.display_value("power", watts, power_display_string(watts, with_unit, system), system, json_output)


def mass(
    ctx: typer.Context,
    kilograms: float = typer.Argument(..., help="Mass in kilograms"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a mass."""
    system = _system(ctx)
    display.display_value("mass", kilograms, mass_display_string(kilograms, system), system, json_output)


def force(
    ctx: typer.Context,
    newtons: float = typer.Argument(..., help="Force in newtons"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a force."""
    system = _system(ctx)
    display.display_value("force", newtons, force_display_string(newtons, system), system, json_output)


def energy(
    ctx: typer.Context,
    kilojoules: float = typer.Argument(..., help="Energy in kilojoules"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show energy."""
    system = _system(ctx)
    text = energy_display_string(kilojoules, system)
    display.display_value("energy", kilojoules, text, system, json_output)


def temperature(
    ctx: typer.Context,
    celsius: float = typer.Argument(..., help="Temperature in Celsius"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a temperature."""
    system = _system(ctx)
    text = temperature_display_string(celsius, system)
    display.display_value("temperature", celsius, text, system, json_output)


def pressure(
    ctx: typer.Context,
    hectopascals: float = typer.Argument(..., help="Pressure in hectopascals"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a pressure."""
    system = _system(ctx)
    text = pressure_display_string(hectopascals, system)
    display.display_value("pressure", hectopascals, text, system, json_output)


def density(
    ctx: typer.Context,
    kg_per_cubic_meter: float = typer.Argument(..., help="Density in kg/m³"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a density."""
    system = _system(ctx)
    text = density_display_string(kg_per_cubic_meter, system)
    display.display_value("density", kg_per_cubic_meter, text, system, json_output)


def climb_time(
    ctx: typer.Context,
    meters_per_second: float = typer.Argument(..., help="Climb rate in meters per second"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a climb rate over time."""
    system = _system(ctx)
    text = elevation_time_display_string(meters_per_second, system)
    display.display_value("climb by time", meters_per_second, text, system, json_output)


def climb_distance(
    ctx: typer.Context,
    meters_per_meter: float = typer.Argument(..., help="Meters climbed per meter travelled"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a climb rate over distance."""
    system = _system(ctx)
    text = elevation_distance_display_string(meters_per_meter, system)
    display.display_value("climb by distance", meters_per_meter, text, system, json_output)


def latlong(
    ctx: typer.Context,
    decimal_degrees: float = typer.Argument(..., help="Latitude or longitude in degrees"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a coordinate as degrees and minutes."""
    system = _system(ctx)
    text = lat_long_display_string(decimal_degrees)
    display.display_value("coordinate", decimal_degrees, text, system, json_output)


def percent(
    ctx: typer.Context,
    fraction: float = typer.Argument(..., help="Fraction, 0.5 is 50%"),
    with_fraction: bool = typer.Option(True, "--fraction/--no-fraction", help="Show 2 decimals"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a percentage."""
    system = _system(ctx)
    text = percent_display_string(fraction, with_fraction)
    display.display_value("percent", fraction, text, system, json_output)


def heart_rate(
    ctx: typer.Context,
    bpm: int = typer.Argument(..., help="Heart rate in beats per minute"),
    with_unit: bool = typer.Option(True, "--unit/--no-unit", help="Append bpm"),
    json_output: bool = typer.Option(False, "--json", "-j", help=JSON_HELP),
) -> None:
    """Show a heart rate."""
    system = _system(ctx)
    text = heart_rate_display_string(bpm, with_unit)
    display.display_value("heart rate", bpm, text, system, json_output)
