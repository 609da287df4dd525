"""Command modules for the measure CLI."""
