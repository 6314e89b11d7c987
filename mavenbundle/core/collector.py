"""Artifact collection: checksum and sign every staged file.

A collection pass walks the staging root, skips sidecar files, and for
each remaining file writes one checksum sidecar per algorithm and then
makes the signing decision. A signing failure aborts the pass; sidecars
already written for earlier files stay in place since they only depend
on their own file's content.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from mavenbundle.core.errors import StagingFileMissing
from mavenbundle.core.hasher import resolve_algorithms, write_checksum
from mavenbundle.core.signer import SignatureManager
from mavenbundle.core.staging import classify
from mavenbundle.models.artifacts import (
    ChecksumRecord,
    DigestAlgorithm,
    SignatureRecord,
    StagedFile,
    is_sidecar,
)
from mavenbundle.models.coordinates import RepositoryCoordinate
from mavenbundle.models.reports import CollectionReport

logger = logging.getLogger(__name__)


def iter_staged_files(
    staging_root: Path,
    coordinate: RepositoryCoordinate | None = None,
) -> Iterator[StagedFile]:
    """Lazily yield every non-sidecar file under *staging_root*.

    Re-walking is side-effect free. Paths are yielded in sorted order.
    """
    staging_root = Path(staging_root)
    if not staging_root.is_dir():
        raise StagingFileMissing([str(staging_root)], staging_root)
    for path in sorted(staging_root.rglob("*")):
        if path.is_file() and not is_sidecar(path):
            yield StagedFile(path=path, role=classify(path, coordinate))


class ArtifactCollector:
    """Writes checksum sidecars and signatures for a staging root.

    Parameters
    ----------
    algorithms:
        Digest algorithms to write. Validated on construction, so an
        unsupported name fails before any file is processed.
    signer:
        Signature manager, or ``None`` to skip signing.
    """

    def __init__(
        self,
        algorithms: Iterable[DigestAlgorithm | str] = (DigestAlgorithm.SHA1, DigestAlgorithm.MD5),
        signer: SignatureManager | None = None,
        coordinate: RepositoryCoordinate | None = None,
    ) -> None:
        self.algorithms = resolve_algorithms(algorithms)
        self.signer = signer
        self.coordinate = coordinate

    def collect(self, staging_root: Path) -> CollectionReport:
        """Run one collection pass over *staging_root*."""
        staging_root = Path(staging_root)
        checksums: list[ChecksumRecord] = []
        signatures: list[SignatureRecord] = []

        for staged in iter_staged_files(staging_root, self.coordinate):
            for algorithm in self.algorithms:
                checksums.append(write_checksum(staged.path, algorithm))
            if self.signer is not None:
                signatures.append(self.signer.ensure_signed(staged.path))

        report = CollectionReport(
            staging_root=staging_root,
            checksums=checksums,
            signatures=signatures,
        )
        logger.info(
            "Collected %d file(s) in %s: %d signed, %d signature(s) fresh",
            report.file_count,
            staging_root,
            report.signed_count,
            report.skipped_count,
        )
        return report
