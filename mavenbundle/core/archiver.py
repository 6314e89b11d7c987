"""Repository archiver: lays a staging root out as a Maven repository zip.

Archive layout::

    {groupPath}/{artifactId}/{version}/<staged files, renamed>
    {groupPath}/{artifactId}/<files from staging/metadata>

Renames come from an ordered list of ``RenameRule`` objects. The first
rule whose predicate matches a file name renames it; sidecars follow
their primary file (``pom-default.xml.sha1`` -> ``<name>.pom.sha1``).
Only files become entries; directories are implied by entry paths.
"""

from __future__ import annotations

import logging
import os
import tempfile
import zipfile
from collections.abc import Callable, Sequence
from pathlib import Path, PurePosixPath

from mavenbundle.core.errors import ArchiveWriteFailure, StagingFileMissing
from mavenbundle.core.staging import METADATA_DIR, POM_DEFAULT
from mavenbundle.models.artifacts import SIDECAR_EXTENSIONS, ArchiveEntry
from mavenbundle.models.coordinates import RepositoryCoordinate

logger = logging.getLogger(__name__)

# Earliest timestamp a zip entry can carry; fixed so output is reproducible.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


class RenameRule:
    """A (predicate, renamer) pair applied to staged file names.

    Parameters
    ----------
    predicate:
        Returns True for file names this rule handles.
    renamer:
        Maps a matching file name to its name inside the archive.
    name:
        Label used in logs and reprs.
    """

    def __init__(
        self,
        predicate: Callable[[str], bool],
        renamer: Callable[[str], str],
        name: str = "",
    ) -> None:
        self.predicate = predicate
        self.renamer = renamer
        self.name = name or getattr(renamer, "__name__", "rename")

    @classmethod
    def exact(cls, source: str, target: str) -> RenameRule:
        """Rule renaming the file literally called *source* to *target*."""
        return cls(lambda n: n == source, lambda _n: target, name=f"{source} -> {target}")

    def __repr__(self) -> str:
        return f"RenameRule({self.name!r})"


def default_rename_rules(coordinate: RepositoryCoordinate) -> list[RenameRule]:
    """The standard rules for a Gradle-produced release staging directory."""
    name = coordinate.artifact_name
    return [
        RenameRule.exact(POM_DEFAULT, f"{name}.pom"),
        RenameRule.exact(f"{name}-base.jar", f"{name}.jar"),
    ]


def apply_rules(file_name: str, rules: Sequence[RenameRule]) -> str:
    """Return the archive name of *file_name* under *rules*.

    Sidecars are renamed through their primary file's name.
    """
    stem, dot, ext = file_name.rpartition(".")
    if dot and stem and ext.lower() in SIDECAR_EXTENSIONS:
        return f"{apply_rules(stem, rules)}.{ext}"
    for rule in rules:
        if rule.predicate(file_name):
            return rule.renamer(file_name)
    return file_name


class RepositoryArchiver:
    """Plans and writes Maven-layout release archives."""

    def __init__(self, rules: Sequence[RenameRule] | None = None) -> None:
        self._rules = list(rules) if rules is not None else None

    def rules_for(self, coordinate: RepositoryCoordinate) -> list[RenameRule]:
        return self._rules if self._rules is not None else default_rename_rules(coordinate)

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(
        self,
        staging_root: Path,
        coordinate: RepositoryCoordinate,
        rules: Sequence[RenameRule] | None = None,
    ) -> list[ArchiveEntry]:
        """Map every staged file onto its archive path.

        On duplicate targets the later source (in sorted walk order)
        wins and a warning is logged. The result is sorted by target.
        """
        staging_root = Path(staging_root)
        if not staging_root.is_dir():
            raise StagingFileMissing([str(staging_root)], staging_root)
        rules = list(rules) if rules is not None else self.rules_for(coordinate)

        entries: dict[str, Path] = {}
        for path in sorted(staging_root.rglob("*")):
            if not path.is_file():
                continue
            relative = PurePosixPath(path.relative_to(staging_root).as_posix())
            if relative.parts[0] == METADATA_DIR and len(relative.parts) > 1:
                base = PurePosixPath(coordinate.artifact_dir)
                relative = PurePosixPath(*relative.parts[1:])
            else:
                base = PurePosixPath(coordinate.version_dir)
            target = str(base / relative.parent / apply_rules(relative.name, rules))
            if target in entries:
                logger.warning(
                    "Archive path %s produced by both %s and %s; keeping the latter",
                    target, entries[target], path,
                )
            entries[target] = path

        return [ArchiveEntry(source=src, target=tgt) for tgt, src in sorted(entries.items())]

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def assemble(
        self,
        staging_root: Path,
        coordinate: RepositoryCoordinate,
        output_path: Path,
        rules: Sequence[RenameRule] | None = None,
    ) -> list[ArchiveEntry]:
        """Write the release archive to *output_path* and return its entries.

        The zip is written to a temporary file beside *output_path* and
        moved into place only once complete.
        """
        entries = self.plan(staging_root, coordinate, rules)
        output_path = Path(output_path)
        tmp_name: str | None = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
            )
            with os.fdopen(fd, "wb") as fh, zipfile.ZipFile(
                fh, "w", compression=zipfile.ZIP_DEFLATED
            ) as zf:
                for entry in entries:
                    info = zipfile.ZipInfo(entry.target, date_time=_ZIP_EPOCH)
                    info.compress_type = zipfile.ZIP_DEFLATED
                    info.external_attr = 0o644 << 16
                    zf.writestr(info, entry.source.read_bytes())
            os.replace(tmp_name, output_path)
            tmp_name = None
        except OSError as exc:
            raise ArchiveWriteFailure(output_path, str(exc)) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info("Wrote %s (%d entries)", output_path, len(entries))
        return entries


def list_entries(archive_path: Path) -> list[str]:
    """Names of the file entries in a release archive."""
    with zipfile.ZipFile(archive_path) as zf:
        return [name for name in zf.namelist() if not name.endswith("/")]
