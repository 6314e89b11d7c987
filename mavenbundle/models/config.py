"""Packaging and signing configuration models.

These are explicit value objects handed to the pipeline. Nothing in
``mavenbundle.core`` reads ambient project state.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mavenbundle.models.artifacts import DigestAlgorithm
from mavenbundle.models.coordinates import RepositoryCoordinate


class SignatureFreshness(str, Enum):
    """How the signature manager decides a signature is stale."""

    MTIME = "mtime"
    CONTENT_HASH = "content-hash"


class SigningConfig(BaseModel):
    """Settings for the external detached-signature tool."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    # --yes: gpg otherwise prompts on the tty before replacing an existing .asc.
    command: tuple[str, ...] = ("gpg", "--yes", "-ab")
    key_id: str | None = None
    timeout_seconds: float = 120.0
    freshness: SignatureFreshness = SignatureFreshness.MTIME
    # Fingerprint store for CONTENT_HASH freshness; must live outside staging.
    state_path: Path = Path(".mavenbundle/signatures.json")


class PackagingConfig(BaseModel):
    """Everything one release packaging run needs."""

    model_config = ConfigDict(frozen=True)

    coordinate: RepositoryCoordinate
    staging_root: Path = Path("build/publications/release")
    output_dir: Path = Path("build/distributions")
    # Names, resolved (and rejected if unsupported) when the pipeline starts.
    algorithms: tuple[str, ...] = (DigestAlgorithm.SHA1.value, DigestAlgorithm.MD5.value)
    signing: SigningConfig = Field(default_factory=SigningConfig)
    local_repository: Path | None = None

    @property
    def archive_name(self) -> str:
        return f"{self.coordinate.artifact_name}-maven.zip"

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.archive_name

    @property
    def metadata_dir(self) -> Path:
        return self.staging_root / "metadata"
