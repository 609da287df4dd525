"""Display utilities for measure CLI with Rich formatting."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from measurements import (
    REGISTRY,
    DisplayContext,
    MeasurementSystem,
    resolve_unit,
)

console = Console()


def display_value(
    quantity: str,
    value: Any,
    text: str,
    system: MeasurementSystem,
    json_output: bool = False,
) -> None:
    """Print a formatted value, or the value and its display string as JSON."""
    if json_output:
        data = {"quantity": quantity, "value": value, "system": system.value, "display": text}
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if text:
        console.print(f"[cyan]{quantity}[/cyan] [bold green]{text}[/bold green]")
    else:
        console.print(f"[cyan]{quantity}[/cyan] [dim]-[/dim]")


def display_units() -> None:
    """Display every registered unit grouped by dimension."""
    table = Table(title="Units", show_header=True, border_style="cyan")
    table.add_column("Dimension", style="cyan")
    table.add_column("Unit")
    table.add_column("Symbol", style="green")
    table.add_column("Kind", style="yellow")
    table.add_column("Base", justify="center")

    for dimension, spec in REGISTRY.items():
        for unit in spec.units:
            is_base = "[bold yellow]*[/bold yellow]" if unit == spec.base_unit else ""
            table.add_row(dimension.value, unit.name, unit.symbol, unit.converter.kind, is_base)

    console.print(table)


def display_systems() -> None:
    """Display the unit each context resolves to in both systems."""
    table = Table(title="Measurement Systems", show_header=True, border_style="cyan")
    table.add_column("Context", style="cyan")
    table.add_column(MeasurementSystem.METRIC.display_name, style="green")
    table.add_column(MeasurementSystem.IMPERIAL.display_name, style="green")

    for context in DisplayContext:
        table.add_row(
            context.value.replace("_", " "),
            resolve_unit(context, MeasurementSystem.METRIC).symbol,
            resolve_unit(context, MeasurementSystem.IMPERIAL).symbol,
        )

    console.print(table)


def display_error(message: str) -> None:
    """Display error message."""
    console.print(f"[red]✗[/red] {message}")
