"""Release pipeline — wires validation, collection and archiving together.

Run order:

    resolve algorithms -> check staging root -> drop previous archive
        -> import metadata (optional) -> require staged
        -> collect (checksums + signatures) -> assemble archive

The pipeline is single-threaded and blocking. Any ``PackagingError``
propagates to the caller; nothing is retried. The archive is only
written after collection has fully succeeded, so a failed run leaves none.
"""

from __future__ import annotations

import logging
from pathlib import Path

from mavenbundle.core.archiver import RenameRule, RepositoryArchiver
from mavenbundle.core.collector import ArtifactCollector
from mavenbundle.core.errors import StagingFileMissing
from mavenbundle.core.hasher import resolve_algorithms
from mavenbundle.core.metadata import import_local_metadata
from mavenbundle.core.signer import SignatureManager
from mavenbundle.core.staging import require_staged
from mavenbundle.models.artifacts import ArchiveEntry
from mavenbundle.models.config import PackagingConfig
from mavenbundle.models.reports import CollectionReport, PackagingReport

logger = logging.getLogger(__name__)


class ReleasePipeline:
    """Packages one staged release into a Maven-repository archive.

    Parameters
    ----------
    config:
        Explicit packaging configuration (coordinate, paths, signing).
    rules:
        Rename rules for the archiver. Defaults to the standard
        ``pom-default.xml`` and ``-base.jar`` renames.
    signer:
        Override the signature manager (mainly for tests). Ignored when
        signing is disabled in *config*.
    """

    def __init__(
        self,
        config: PackagingConfig,
        *,
        rules: list[RenameRule] | None = None,
        signer: SignatureManager | None = None,
    ) -> None:
        self.config = config
        # Fails fast on a misconfigured algorithm list.
        self.algorithms = resolve_algorithms(config.algorithms)
        if config.signing.enabled:
            self.signer: SignatureManager | None = signer or SignatureManager(config.signing)
        else:
            self.signer = None
        self.collector = ArtifactCollector(
            self.algorithms, signer=self.signer, coordinate=config.coordinate
        )
        self.archiver = RepositoryArchiver(rules)

    def import_metadata(self) -> Path | None:
        coordinate = self.config.coordinate
        return import_local_metadata(
            self.config.staging_root,
            coordinate.group_id,
            coordinate.artifact_id,
            self.config.local_repository,
        )

    def checksum_only(self) -> CollectionReport:
        """Validate the staging root and run a collection pass."""
        require_staged(self.config.staging_root, self.config.coordinate)
        return self.collector.collect(self.config.staging_root)

    def assemble_only(self) -> list[ArchiveEntry]:
        """Validate the staging root and write the archive from what is staged."""
        require_staged(self.config.staging_root, self.config.coordinate)
        return self.archiver.assemble(
            self.config.staging_root,
            self.config.coordinate,
            self.config.output_path,
        )

    def run(self, *, import_metadata: bool = False) -> PackagingReport:
        """Execute the full pipeline and return its report."""
        coordinate = self.config.coordinate
        staging_root = Path(self.config.staging_root)
        logger.info("Packaging %s from %s", coordinate, staging_root)

        if not staging_root.is_dir():
            raise StagingFileMissing([str(staging_root)], staging_root)

        # An archive from an earlier run must not survive a failed one.
        output_path = Path(self.config.output_path)
        if output_path.exists():
            logger.debug("Removing previous archive %s", output_path)
            output_path.unlink()

        metadata_path = self.import_metadata() if import_metadata else None
        collection = self.checksum_only()
        entries = self.assemble_only()

        return PackagingReport(
            coordinate=coordinate,
            collection=collection,
            archive_path=self.config.output_path,
            entries=entries,
            metadata_imported=metadata_path,
        )
