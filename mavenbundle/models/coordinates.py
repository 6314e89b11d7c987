"""Repository coordinate model: the (groupId, artifactId, version) triple."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RepositoryCoordinate(BaseModel):
    """Location of an artifact inside a Maven-layout repository.

    The coordinate alone determines every directory path inside the
    release archive, so it is validated eagerly.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str  # "dev.sbs"
    artifact_id: str  # "mylib"
    version: str  # "1.0.3", "2.0.0-rc.1"

    @field_validator("group_id")
    @classmethod
    def _check_group(cls, value: str) -> str:
        value = value.strip()
        if not value or any(not part for part in value.split(".")):
            raise ValueError(f"invalid groupId: {value!r}")
        if "/" in value or "\\" in value:
            raise ValueError(f"groupId must be dot-separated: {value!r}")
        return value

    @field_validator("artifact_id", "version")
    @classmethod
    def _check_segment(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("coordinate segment must not be empty")
        if "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"coordinate segment is not a single path segment: {value!r}")
        return value

    @classmethod
    def from_project(cls, group: str, project_name: str, version: str) -> RepositoryCoordinate:
        """Build a coordinate from build-project values (artifactId is the lowercased name)."""
        return cls(group_id=group, artifact_id=project_name.lower(), version=version)

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/")

    @property
    def artifact_dir(self) -> str:
        """``groupPath/artifactId``: where repository-level metadata lives."""
        return f"{self.group_path}/{self.artifact_id}"

    @property
    def version_dir(self) -> str:
        """``groupPath/artifactId/version``: where the versioned artifacts live."""
        return f"{self.artifact_dir}/{self.version}"

    @property
    def artifact_name(self) -> str:
        return f"{self.artifact_id}-{self.version}"

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"
