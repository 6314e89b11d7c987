"""``mavenbundle package | checksum | assemble`` — run the release pipeline.

``package`` runs everything: checksums, signatures and the archive.
``checksum`` stops after the collection pass; ``assemble`` only writes
the archive from what is already staged.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from mavenbundle.cli.commands._options import build_config
from mavenbundle.core.errors import PackagingError
from mavenbundle.core.pipeline import ReleasePipeline
from mavenbundle.models.config import SignatureFreshness

console = Console()

_GROUP = typer.Argument(..., help="Maven groupId, e.g. dev.sbs.")
_PROJECT = typer.Argument(..., help="Project name; lowercased into the artifactId.")
_VERSION = typer.Argument(..., help="Release version.")
_STAGING = typer.Option(None, "--staging", "-s", help="Staging root holding the build outputs.")
_OUTPUT = typer.Option(None, "--output-dir", "-o", help="Directory for the release archive.")


def _fail(exc: PackagingError) -> None:
    console.print(f"[bold red]{type(exc).__name__}:[/bold red] {exc}")
    raise typer.Exit(code=1)


def package_cmd(
    group: str = _GROUP,
    project: str = _PROJECT,
    version: str = _VERSION,
    staging: Path | None = _STAGING,
    output_dir: Path | None = _OUTPUT,
    sign: bool | None = typer.Option(
        None, "--sign/--no-sign", help="Create detached signatures (default from settings)."
    ),
    key_id: str | None = typer.Option(None, "--key", "-k", help="Signing key passed as --local-user."),
    freshness: SignatureFreshness | None = typer.Option(
        None, "--freshness", help="How stale signatures are detected."
    ),
    timeout: float | None = typer.Option(None, "--sign-timeout", help="Seconds before signing is aborted."),
    import_metadata: bool = typer.Option(
        False,
        "--import-metadata/--no-import-metadata",
        help="Stage maven-metadata-local.xml from the local Maven repository first.",
    ),
    local_repository: Path | None = typer.Option(
        None, "--local-repo", help="Local Maven repository root (default ~/.m2/repository)."
    ),
) -> None:
    """Checksum, sign and archive a staged release."""
    config = build_config(
        console, group, project, version,
        staging=staging, output_dir=output_dir, sign=sign, key_id=key_id,
        freshness=freshness, timeout=timeout, local_repository=local_repository,
    )
    try:
        report = ReleasePipeline(config).run(import_metadata=import_metadata)
    except PackagingError as exc:
        _fail(exc)
        return

    collection = report.collection
    console.print()
    console.print(
        Panel(
            "\n".join([
                "[bold green]Release archive written![/bold green]",
                "",
                f"[bold]Coordinate:[/bold] {report.coordinate}",
                f"[bold]Archive:[/bold]    {report.archive_path}",
                f"[bold]Entries:[/bold]    {len(report.entries)}",
                f"[bold]Files:[/bold]      {collection.file_count}",
                f"[bold]Signed:[/bold]     {collection.signed_count}"
                f" ([dim]{collection.skipped_count} already fresh[/dim])",
            ]),
            title="[bold]mavenbundle[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )


def checksum_cmd(
    group: str = _GROUP,
    project: str = _PROJECT,
    version: str = _VERSION,
    staging: Path | None = _STAGING,
    sign: bool | None = typer.Option(
        None, "--sign/--no-sign", help="Also create detached signatures."
    ),
    key_id: str | None = typer.Option(None, "--key", "-k", help="Signing key passed as --local-user."),
) -> None:
    """Write checksum (and signature) sidecars without archiving."""
    config = build_config(console, group, project, version, staging=staging, sign=sign, key_id=key_id)
    try:
        report = ReleasePipeline(config).checksum_only()
    except PackagingError as exc:
        _fail(exc)
        return
    console.print(
        f"[green]Checksummed {report.file_count} file(s)[/green], "
        f"signed {report.signed_count}, {report.skipped_count} already fresh."
    )


def assemble_cmd(
    group: str = _GROUP,
    project: str = _PROJECT,
    version: str = _VERSION,
    staging: Path | None = _STAGING,
    output_dir: Path | None = _OUTPUT,
) -> None:
    """Write the release archive from the current staging root."""
    config = build_config(
        console, group, project, version, staging=staging, output_dir=output_dir, sign=False
    )
    try:
        entries = ReleasePipeline(config).assemble_only()
    except PackagingError as exc:
        _fail(exc)
        return
    console.print(f"[green]Wrote {config.output_path}[/green] ({len(entries)} entries)")
