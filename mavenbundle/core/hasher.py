"""Checksum generation and checksum sidecar files.

Digests are always recomputed from the current bytes. There is no
cache, so a caller must re-invoke after content may have changed.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable
from pathlib import Path

from mavenbundle.core.errors import UnsupportedAlgorithm
from mavenbundle.models.artifacts import ChecksumRecord, DigestAlgorithm

logger = logging.getLogger(__name__)


def resolve_algorithm(algorithm: DigestAlgorithm | str) -> DigestAlgorithm:
    """Map an algorithm name onto the supported set.

    Raises UnsupportedAlgorithm for anything outside {SHA-1, MD5}.
    """
    if isinstance(algorithm, DigestAlgorithm):
        return algorithm
    try:
        return DigestAlgorithm(algorithm)
    except ValueError:
        raise UnsupportedAlgorithm(algorithm) from None


def resolve_algorithms(
    algorithms: Iterable[DigestAlgorithm | str],
) -> tuple[DigestAlgorithm, ...]:
    """Validate a configured algorithm list before any file is touched.

    Duplicates are dropped; order is preserved.
    """
    resolved: list[DigestAlgorithm] = []
    for algorithm in algorithms:
        alg = resolve_algorithm(algorithm)
        if alg not in resolved:
            resolved.append(alg)
    return tuple(resolved)


def sidecar_extension(algorithm: DigestAlgorithm | str) -> str:
    """Return the sidecar extension (``sha1`` or ``md5``) for *algorithm*."""
    return resolve_algorithm(algorithm).extension


def compute_digest(data: bytes, algorithm: DigestAlgorithm | str) -> str:
    """Return the lowercase, zero-padded hex digest of *data*."""
    alg = resolve_algorithm(algorithm)
    return hashlib.new(alg.hashlib_name, data).hexdigest()


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes (signature fingerprints)."""
    return hashlib.sha256(data).hexdigest()


def write_checksum(path: Path, algorithm: DigestAlgorithm | str) -> ChecksumRecord:
    """Digest the file at *path* and write ``<path>.<ext>`` next to it.

    The sidecar holds exactly the hex digest, no trailing newline.
    Existing sidecars are overwritten.
    """
    path = Path(path)
    alg = resolve_algorithm(algorithm)
    record = ChecksumRecord(
        path=path,
        algorithm=alg,
        digest=compute_digest(path.read_bytes(), alg),
    )
    record.sidecar_path.write_text(record.digest, encoding="ascii")
    logger.debug("Wrote %s checksum %s", alg.value, record.sidecar_path)
    return record
