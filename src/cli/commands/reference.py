"""Reference table commands for measure CLI."""

from cli import display


def units() -> None:
    """List every unit values can be displayed in."""
    display.display_units()


def systems() -> None:
    """Show the display unit of each context in both systems."""
    display.display_systems()
