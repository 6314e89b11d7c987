"""Staging root inspection: role classification and presence checks."""

from __future__ import annotations

from pathlib import Path

from mavenbundle.core.errors import StagingFileMissing
from mavenbundle.models.artifacts import ArtifactRole
from mavenbundle.models.coordinates import RepositoryCoordinate

POM_DEFAULT = "pom-default.xml"
METADATA_DIR = "metadata"
METADATA_FILE = "maven-metadata.xml"


def classify(path: Path, coordinate: RepositoryCoordinate | None = None) -> ArtifactRole:
    """Guess the role of a staged file from its location and name."""
    path = Path(path)
    name = path.name
    if path.parent.name == METADATA_DIR or name.startswith("maven-metadata"):
        return ArtifactRole.METADATA
    if name == POM_DEFAULT or name.endswith(".pom"):
        return ArtifactRole.POM
    if name.endswith("-sources.jar"):
        return ArtifactRole.SOURCES_JAR
    if name.endswith("-javadoc.jar"):
        return ArtifactRole.JAVADOC_JAR
    if name.endswith(".jar"):
        if coordinate is None or name.startswith(coordinate.artifact_id):
            return ArtifactRole.JAR
    return ArtifactRole.OTHER


def expected_artifacts(coordinate: RepositoryCoordinate) -> dict[ArtifactRole, tuple[str, ...]]:
    """File names that satisfy each required role (any one name suffices)."""
    name = coordinate.artifact_name
    return {
        ArtifactRole.JAR: (f"{name}-base.jar", f"{name}.jar"),
        ArtifactRole.SOURCES_JAR: (f"{name}-sources.jar",),
        ArtifactRole.JAVADOC_JAR: (f"{name}-javadoc.jar",),
        ArtifactRole.POM: (POM_DEFAULT, f"{name}.pom"),
    }


def require_staged(staging_root: Path, coordinate: RepositoryCoordinate) -> None:
    """Raise StagingFileMissing unless every required artifact is staged.

    Only the top level of the staging root is checked; that is where
    the build step drops its outputs.
    """
    staging_root = Path(staging_root)
    if not staging_root.is_dir():
        raise StagingFileMissing([str(staging_root)], staging_root)

    missing = [
        " or ".join(names)
        for names in expected_artifacts(coordinate).values()
        if not any((staging_root / n).is_file() for n in names)
    ]
    if missing:
        raise StagingFileMissing(missing, staging_root)
