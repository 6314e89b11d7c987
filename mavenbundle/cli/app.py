"""Main Typer application — imports and registers all CLI commands.

Entry point: ``mavenbundle`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from mavenbundle.cli.commands.inspect_cmd import inspect_cmd
from mavenbundle.cli.commands.metadata_cmd import import_metadata_cmd
from mavenbundle.cli.commands.package import assemble_cmd, checksum_cmd, package_cmd
from mavenbundle.config import settings

app = typer.Typer(
    name="mavenbundle",
    help="mavenbundle: checksum, sign and archive a staged Maven release.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# Register subcommands
app.command(name="package", help="Checksum, sign and archive a staged release.")(package_cmd)
app.command(name="checksum", help="Write checksum and signature sidecars only.")(checksum_cmd)
app.command(name="assemble", help="Write the release archive from the staging root.")(assemble_cmd)
app.command(name="inspect", help="List the entries of a release archive.")(inspect_cmd)
app.command(
    name="import-metadata", help="Stage maven-metadata-local.xml from the local repository."
)(import_metadata_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
