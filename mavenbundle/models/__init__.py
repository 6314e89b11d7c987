"""mavenbundle data models — all Pydantic v2, all frozen (immutable)."""

from mavenbundle.models.artifacts import (
    SIDECAR_EXTENSIONS,
    ArchiveEntry,
    ArtifactRole,
    ChecksumRecord,
    DigestAlgorithm,
    SignatureRecord,
    StagedFile,
    is_sidecar,
)
from mavenbundle.models.config import PackagingConfig, SignatureFreshness, SigningConfig
from mavenbundle.models.coordinates import RepositoryCoordinate
from mavenbundle.models.reports import CollectionReport, PackagingReport

__all__ = [
    # artifacts
    "SIDECAR_EXTENSIONS",
    "ArchiveEntry",
    "ArtifactRole",
    "ChecksumRecord",
    "DigestAlgorithm",
    "SignatureRecord",
    "StagedFile",
    "is_sidecar",
    # coordinates
    "RepositoryCoordinate",
    # config
    "PackagingConfig",
    "SignatureFreshness",
    "SigningConfig",
    # reports
    "CollectionReport",
    "PackagingReport",
]
