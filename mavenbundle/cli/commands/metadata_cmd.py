"""``mavenbundle import-metadata`` — stage local-repository metadata."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from mavenbundle.cli.commands import _options
from mavenbundle.core.metadata import import_local_metadata

console = Console()


def import_metadata_cmd(
    group: str = typer.Argument(..., help="Maven groupId, e.g. dev.sbs."),
    project: str = typer.Argument(..., help="Project name; lowercased into the artifactId."),
    staging: Path | None = typer.Option(None, "--staging", "-s", help="Staging root."),
    local_repository: Path | None = typer.Option(
        None, "--local-repo", help="Local Maven repository root (default ~/.m2/repository)."
    ),
) -> None:
    """Copy maven-metadata-local.xml into the staging metadata directory."""
    s = _options.default_settings
    group = group.strip()
    artifact_id = project.strip().lower()
    if not group or not artifact_id or "/" in artifact_id:
        console.print("[bold red]Invalid coordinate:[/bold red] group and project are required")
        raise typer.Exit(code=1)

    staged = import_local_metadata(
        staging or s.staging_root,
        group,
        artifact_id,
        local_repository or s.local_repository,
    )
    if staged is None:
        console.print("[yellow]No local metadata found; nothing staged.[/yellow]")
        return
    console.print(f"[green]Staged[/green] {staged}")
