"""mavenbundle CLI — Typer-based command-line interface.

Provides the ``mavenbundle`` command with subcommands for the full
packaging run, the checksum/sign pass alone, archive assembly alone,
archive inspection and local metadata import.

All output uses Rich for formatted terminal display.
"""
