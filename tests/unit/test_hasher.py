"""Tests for checksum generation and checksum sidecars."""

from __future__ import annotations

from pathlib import Path

import pytest

from mavenbundle.core.errors import UnsupportedAlgorithm
from mavenbundle.core.hasher import (
    compute_digest,
    resolve_algorithms,
    sidecar_extension,
    write_checksum,
)
from mavenbundle.models.artifacts import DigestAlgorithm


# ---------------------------------------------------------------------------
# Test: digest computation
# ---------------------------------------------------------------------------


class TestComputeDigest:
    """Digests are lowercase, zero-padded hex."""

    def test_known_sha1(self):
        """SHA-1 of "abc" matches the published vector."""
        assert compute_digest(b"abc", "SHA-1") == "a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_known_md5(self):
        """MD5 of "abc" matches the published vector."""
        assert compute_digest(b"abc", DigestAlgorithm.MD5) == "900150983cd24fb0d6963f7d28e17f72"

    def test_empty_input(self):
        """Empty input has a well-defined digest."""
        assert compute_digest(b"", "MD5") == "d41d8cd98f00b204e9800998ecf8427e"
        assert compute_digest(b"", "SHA-1") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_lowercase_and_fixed_width(self):
        """Digests are lowercase and padded to the full width."""
        for alg, width in ((DigestAlgorithm.SHA1, 40), (DigestAlgorithm.MD5, 32)):
            digest = compute_digest(b"\x00\x01\xff", alg)
            assert len(digest) == width
            assert digest == digest.lower()

    def test_deterministic(self):
        """The same staging root always gives the same plan."""
        data = b"same bytes every time"
        assert compute_digest(data, "SHA-1") == compute_digest(data, "SHA-1")

    @pytest.mark.parametrize("name", ["SHA-256", "sha1", "CRC32", ""])
    def test_unsupported_algorithm(self, name: str):
        """Names outside SHA-1 and MD5 are rejected by name."""
        with pytest.raises(UnsupportedAlgorithm) as exc_info:
            compute_digest(b"abc", name)
        assert exc_info.value.algorithm == name


# ---------------------------------------------------------------------------
# Test: algorithm names and extensions
# ---------------------------------------------------------------------------


class TestAlgorithmResolution:
    """Configured names resolve to algorithms up front."""

    def test_extensions(self):
        """Each algorithm maps to its sidecar extension."""
        assert sidecar_extension("SHA-1") == "sha1"
        assert sidecar_extension(DigestAlgorithm.MD5) == "md5"

    def test_resolve_preserves_order_and_dedupes(self):
        """Resolution keeps first-seen order and drops repeats."""
        assert resolve_algorithms(["MD5", "SHA-1", "MD5"]) == (
            DigestAlgorithm.MD5,
            DigestAlgorithm.SHA1,
        )

    def test_resolve_rejects_whole_list(self):
        """One bad name fails the whole list."""
        with pytest.raises(UnsupportedAlgorithm):
            resolve_algorithms(["SHA-1", "SHA-512"])


# ---------------------------------------------------------------------------
# Test: checksum sidecars
# ---------------------------------------------------------------------------


class TestWriteChecksum:
    """write_checksum() writes <path>.<ext> with just the digest."""

    def test_writes_sidecar(self, tmp_path: Path):
        """The sidecar holds the digest of the file."""
        target = tmp_path / "lib.jar"
        target.write_bytes(b"abc")
        record = write_checksum(target, "SHA-1")
        assert record.sidecar_path == tmp_path / "lib.jar.sha1"
        assert record.sidecar_path.read_bytes() == b"a9993e364706816aba3e25717850c26c9cd0d89d"

    def test_no_trailing_newline(self, tmp_path: Path):
        """No newline follows the digest."""
        target = tmp_path / "lib.jar"
        target.write_bytes(b"abc")
        record = write_checksum(target, "MD5")
        assert not record.sidecar_path.read_text().endswith("\n")

    def test_recomputes_after_change(self, tmp_path: Path):
        """Checksums are recomputed, never cached."""
        target = tmp_path / "lib.jar"
        target.write_bytes(b"one")
        first = write_checksum(target, "MD5")
        target.write_bytes(b"two")
        second = write_checksum(target, "MD5")
        assert first.digest != second.digest
        assert second.sidecar_path.read_text() == second.digest
