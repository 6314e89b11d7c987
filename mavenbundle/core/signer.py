"""Detached signatures via an external signing tool.

Signing is the expensive (and often interactive) step of a release, so
a file is only re-signed when its ``.asc`` sidecar is stale:

* ``mtime`` freshness: the sidecar is missing, or its modification time
  is strictly earlier than the source file's.
* ``content-hash`` freshness: as above, or the SHA-256 of the content
  differs from the fingerprint recorded when it was last signed. This
  survives tooling that rewrites content while preserving timestamps.

The tool is expected to write ``<path>.asc`` itself (``gpg --yes -ab <path>``).
A stale ``.asc`` is removed first. Any failure to run the tool, a non-zero
exit, or a timeout is fatal.
"""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

from mavenbundle.core.errors import SigningToolFailure
from mavenbundle.core.hasher import sha256_hex
from mavenbundle.models.artifacts import SIGNATURE_EXTENSION, SignatureRecord
from mavenbundle.models.config import SignatureFreshness, SigningConfig

logger = logging.getLogger(__name__)


def signature_path(path: Path) -> Path:
    """Return the ``.asc`` sidecar path for *path*."""
    path = Path(path)
    return path.with_name(f"{path.name}.{SIGNATURE_EXTENSION}")


class FingerprintStore:
    """JSON file mapping absolute source paths to the SHA-256 they were signed at."""

    def __init__(self, state_path: Path) -> None:
        self._path = Path(state_path)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        return json.loads(self._path.read_text(encoding="utf-8"))

    def get(self, path: Path) -> str | None:
        return self._load().get(str(Path(path).resolve()))

    def put(self, path: Path, fingerprint: str) -> None:
        data = self._load()
        data[str(Path(path).resolve())] = fingerprint
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")


class SignatureManager:
    """Decides whether files need signing and runs the signing tool.

    Parameters
    ----------
    config:
        Signing configuration. ``config.enabled`` is not consulted here;
        callers skip the manager entirely when signing is off.
    """

    def __init__(self, config: SigningConfig | None = None) -> None:
        self.config = config or SigningConfig()
        self._fingerprints = FingerprintStore(self.config.state_path)

    # ------------------------------------------------------------------
    # Freshness
    # ------------------------------------------------------------------

    def should_sign(self, path: Path) -> bool:
        """True iff the signature sidecar of *path* is missing or stale."""
        path = Path(path)
        asc = signature_path(path)
        if not asc.exists():
            return True
        if asc.stat().st_mtime < path.stat().st_mtime:
            return True
        if self.config.freshness == SignatureFreshness.CONTENT_HASH:
            return self._fingerprints.get(path) != sha256_hex(path.read_bytes())
        return False

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def command_for(self, path: Path) -> list[str]:
        """Build the signing command line for *path*."""
        command = list(self.config.command)
        if self.config.key_id:
            command[1:1] = ["--local-user", self.config.key_id]
        command.append(str(Path(path).resolve()))
        return command

    def sign(self, path: Path) -> SignatureRecord:
        """Run the signing tool for *path*, blocking until it exits.

        Raises SigningToolFailure on launch failure, timeout or a
        non-zero exit status.
        """
        path = Path(path)
        command = self.command_for(path)
        # Signing tools refuse (or prompt) to overwrite an existing signature.
        signature_path(path).unlink(missing_ok=True)
        logger.info("Signing %s", path)
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.config.timeout_seconds,
            )
        except subprocess.TimeoutExpired:
            raise SigningToolFailure(
                path, None, f"timed out after {self.config.timeout_seconds:g}s"
            ) from None
        except OSError as exc:
            raise SigningToolFailure(path, None, f"could not launch {command[0]!r}: {exc}") from exc

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise SigningToolFailure(path, result.returncode, detail[-500:])

        if self.config.freshness == SignatureFreshness.CONTENT_HASH:
            self._fingerprints.put(path, sha256_hex(path.read_bytes()))
        return SignatureRecord(path=path, signed=True)

    def ensure_signed(self, path: Path) -> SignatureRecord:
        """Sign *path* if its signature is stale, otherwise leave it alone."""
        if self.should_sign(path):
            return self.sign(path)
        logger.debug("Signature for %s is fresh; skipping", path)
        return SignatureRecord(path=Path(path), signed=False)
