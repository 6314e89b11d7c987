"""``mavenbundle inspect ARCHIVE`` — list the entries of a release archive."""

from __future__ import annotations

import zipfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

console = Console()


def inspect_cmd(
    archive: Path = typer.Argument(..., help="Release archive to list."),
) -> None:
    """Show every entry in a release archive with its size."""
    if not archive.is_file():
        console.print(f"[bold red]Archive not found:[/bold red] {archive}")
        raise typer.Exit(code=1)

    table = Table(title=archive.name, show_header=True, header_style="bold cyan")
    table.add_column("Entry", style="cyan")
    table.add_column("Size", justify="right")

    with zipfile.ZipFile(archive) as zf:
        infos = [info for info in zf.infolist() if not info.is_dir()]
    for info in infos:
        table.add_row(info.filename, str(info.file_size))

    console.print(table)
    console.print(f"[dim]{len(infos)} entries[/dim]")
