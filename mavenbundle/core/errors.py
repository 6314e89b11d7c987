"""Failure taxonomy for a packaging run.

Every error is fatal to the run and is never retried. Each one carries
enough context (path, algorithm, exit code) to diagnose the failure
without re-running.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class PackagingError(RuntimeError):
    """Base class for all packaging pipeline failures."""


class UnsupportedAlgorithm(PackagingError):
    """Raised when a digest algorithm is not in the supported set."""

    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported algorithm: {algorithm}")


class StagingFileMissing(PackagingError):
    """Raised when the staging root or an expected artifact is absent."""

    def __init__(self, missing: Iterable[str], staging_root: Path) -> None:
        self.missing = list(missing)
        self.staging_root = Path(staging_root)
        super().__init__(
            f"Missing from staging root {self.staging_root}: {', '.join(self.missing)}"
        )


class SigningToolFailure(PackagingError):
    """Raised when the signing subprocess fails, times out, or cannot start.

    ``returncode`` is ``None`` when the process never produced an exit
    status (launch failure or timeout).
    """

    def __init__(self, path: Path, returncode: int | None, detail: str = "") -> None:
        self.path = Path(path)
        self.returncode = returncode
        self.detail = detail
        status = f"exit code {returncode}" if returncode is not None else "no exit status"
        message = f"Signing failed for {self.path} ({status})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ArchiveWriteFailure(PackagingError):
    """Raised when the output archive cannot be written."""

    def __init__(self, path: Path, detail: str = "") -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"Could not write archive {self.path}: {detail}")
