"""Shared option handling: settings + CLI flags -> PackagingConfig."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from mavenbundle.config import BundleSettings, settings as default_settings
from mavenbundle.models.config import PackagingConfig, SignatureFreshness, SigningConfig
from mavenbundle.models.coordinates import RepositoryCoordinate


def build_config(
    console: Console,
    group: str,
    project: str,
    version: str,
    *,
    staging: Path | None = None,
    output_dir: Path | None = None,
    sign: bool | None = None,
    key_id: str | None = None,
    freshness: SignatureFreshness | None = None,
    timeout: float | None = None,
    local_repository: Path | None = None,
    settings: BundleSettings | None = None,
) -> PackagingConfig:
    """Merge CLI options over settings; exits with code 1 on bad coordinates."""
    s = settings or default_settings
    try:
        coordinate = RepositoryCoordinate.from_project(group, project, version)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid coordinate:[/bold red] {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1)

    signing = SigningConfig(
        enabled=s.sign if sign is None else sign,
        command=tuple(s.gpg_command),
        key_id=(key_id or s.gpg_key_id) or None,
        timeout_seconds=timeout if timeout is not None else s.sign_timeout_seconds,
        freshness=freshness or s.signature_freshness,
        state_path=s.state_path,
    )
    return PackagingConfig(
        coordinate=coordinate,
        staging_root=staging or s.staging_root,
        output_dir=output_dir or s.output_dir,
        algorithms=tuple(s.algorithms),
        signing=signing,
        local_repository=local_repository or s.local_repository,
    )
