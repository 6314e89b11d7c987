"""Import repository-level metadata from a local Maven repository.

After ``publishToMavenLocal`` the local repository holds
``{groupPath}/{artifactId}/maven-metadata-local.xml``. It is staged as
``{staging}/metadata/maven-metadata.xml`` so the archiver places it
beside the version directories.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from mavenbundle.core.staging import METADATA_DIR, METADATA_FILE

logger = logging.getLogger(__name__)

LOCAL_METADATA_FILE = "maven-metadata-local.xml"


def default_local_repository() -> Path:
    return Path.home() / ".m2" / "repository"


def import_local_metadata(
    staging_root: Path,
    group_id: str,
    artifact_id: str,
    local_repository: Path | None = None,
) -> Path | None:
    """Copy the local-repository metadata into the staging root.

    Returns the staged path, or ``None`` (with a warning) when the local
    repository has no metadata for this artifact. An already staged copy
    with identical bytes is left untouched, so its signature stays fresh.
    """
    repo = Path(local_repository) if local_repository else default_local_repository()
    source = repo / group_id.replace(".", "/") / artifact_id / LOCAL_METADATA_FILE
    if not source.is_file():
        logger.warning("%s not found at: %s", LOCAL_METADATA_FILE, source)
        return None

    target_dir = Path(staging_root) / METADATA_DIR
    target = target_dir / METADATA_FILE
    if target.is_file() and target.read_bytes() == source.read_bytes():
        logger.debug("Staged metadata %s is up to date", target)
        return target

    target_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
    logger.info("Staged repository metadata from %s", source)
    return target
