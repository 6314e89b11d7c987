"""Staged artifact and sidecar record models (immutable once created)."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

# Extensions of files derived from other staged files. Never inputs.
SIDECAR_EXTENSIONS: frozenset[str] = frozenset({"sha1", "md5", "asc"})
SIGNATURE_EXTENSION = "asc"


class ArtifactRole(str, Enum):
    """Logical role of a staged build output."""

    JAR = "jar"
    SOURCES_JAR = "sources-jar"
    JAVADOC_JAR = "javadoc-jar"
    POM = "pom"
    METADATA = "metadata"
    OTHER = "other"


class DigestAlgorithm(str, Enum):
    """Supported checksum algorithms, valued by their canonical names."""

    SHA1 = "SHA-1"
    MD5 = "MD5"

    @property
    def extension(self) -> str:
        """Sidecar file extension for this algorithm."""
        return _EXTENSIONS[self]

    @property
    def hashlib_name(self) -> str:
        return _HASHLIB_NAMES[self]


_EXTENSIONS = {DigestAlgorithm.SHA1: "sha1", DigestAlgorithm.MD5: "md5"}
_HASHLIB_NAMES = {DigestAlgorithm.SHA1: "sha1", DigestAlgorithm.MD5: "md5"}


def is_sidecar(path: Path) -> bool:
    """True if *path* is a checksum or signature sidecar."""
    return path.suffix.lstrip(".").lower() in SIDECAR_EXTENSIONS


class StagedFile(BaseModel):
    """A build output sitting in the staging root.

    Content is read lazily through ``read_bytes()`` so a collection pass
    holds at most one file in memory at a time.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    role: ArtifactRole = ArtifactRole.OTHER

    @property
    def name(self) -> str:
        return self.path.name

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


class ChecksumRecord(BaseModel):
    """One digest of one file, persisted as ``<path>.<ext>``."""

    model_config = ConfigDict(frozen=True)

    path: Path
    algorithm: DigestAlgorithm
    digest: str  # lowercase hex

    @property
    def sidecar_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}.{self.algorithm.extension}")


class SignatureRecord(BaseModel):
    """Detached signature state of one file after a signing decision.

    ``signed`` is True when the signing tool ran for this file during
    the current pass, False when the existing signature was still fresh.
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    signed: bool

    @property
    def sidecar_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}.{SIGNATURE_EXTENSION}")


class ArchiveEntry(BaseModel):
    """A (source file, target archive path) mapping."""

    model_config = ConfigDict(frozen=True)

    source: Path
    target: str  # POSIX path inside the archive
