"""Result models produced by a collection pass and a packaging run."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mavenbundle.models.artifacts import ArchiveEntry, ChecksumRecord, SignatureRecord
from mavenbundle.models.coordinates import RepositoryCoordinate


class CollectionReport(BaseModel):
    """Checksums written and signing decisions made in one collection pass."""

    model_config = ConfigDict(frozen=True)

    staging_root: Path
    checksums: list[ChecksumRecord] = []
    signatures: list[SignatureRecord] = []

    @property
    def file_count(self) -> int:
        return len({record.path for record in self.checksums} | {s.path for s in self.signatures})

    @property
    def signed_count(self) -> int:
        return sum(1 for s in self.signatures if s.signed)

    @property
    def skipped_count(self) -> int:
        return sum(1 for s in self.signatures if not s.signed)


class PackagingReport(BaseModel):
    """Summary of a full packaging run."""

    model_config = ConfigDict(frozen=True)

    coordinate: RepositoryCoordinate
    collection: CollectionReport
    archive_path: Path
    entries: list[ArchiveEntry]
    metadata_imported: Path | None = None
    finished_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def entry_names(self) -> list[str]:
        return [entry.target for entry in self.entries]
