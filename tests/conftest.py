"""Shared test fixtures for mavenbundle."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from mavenbundle.models.config import PackagingConfig, SigningConfig
from mavenbundle.models.coordinates import RepositoryCoordinate

# Stand-in for ``gpg -ab``: writes <path>.asc and logs each call.
_FAKE_SIGNER = """\
import sys
from pathlib import Path

target = Path(sys.argv[-1])
with open(Path(__file__).with_name("calls.log"), "a", encoding="utf-8") as log:
    log.write(str(target) + "\\n")
target.with_name(target.name + ".asc").write_text(
    "-----BEGIN PGP SIGNATURE-----\\nfake\\n-----END PGP SIGNATURE-----\\n"
)
"""

_FAILING_SIGNER = """\
import sys

sys.stderr.write("gpg: signing failed: No secret key\\n")
sys.exit(1)
"""

_HANGING_SIGNER = """\
import time

time.sleep(30)
"""

# Behaves like ``gpg -ab`` without ``--yes``: refuses to replace an existing .asc.
_STRICT_SIGNER = """\
import sys
from pathlib import Path

target = Path(sys.argv[-1])
asc = target.with_name(target.name + ".asc")
if asc.exists():
    sys.stderr.write("gpg: signing failed: File exists\\n")
    sys.exit(2)
asc.write_text("-----BEGIN PGP SIGNATURE-----\\nstrict\\n-----END PGP SIGNATURE-----\\n")
"""

# Emits Latin-1 diagnostics, as gpg does under a non-UTF-8 locale.
_GARBLED_SIGNER = """\
import sys

sys.stderr.buffer.write(b"gpg: \\xe9chec de la signature\\n")
sys.exit(2)
"""


@pytest.fixture
def coordinate() -> RepositoryCoordinate:
    """The coordinate used throughout the scenario tests."""
    return RepositoryCoordinate(group_id="dev.sbs", artifact_id="mylib", version="1.0.3")


@pytest.fixture
def staging(tmp_path: Path) -> Path:
    """A staging root laid out the way the Gradle release build leaves it."""
    root = tmp_path / "publications" / "release"
    root.mkdir(parents=True)
    (root / "mylib-1.0.3-base.jar").write_bytes(b"PK\x03\x04 library classes")
    (root / "mylib-1.0.3-sources.jar").write_bytes(b"PK\x03\x04 sources")
    (root / "mylib-1.0.3-javadoc.jar").write_bytes(b"PK\x03\x04 javadoc")
    (root / "pom-default.xml").write_text(
        "<project><groupId>dev.sbs</groupId><artifactId>mylib</artifactId>"
        "<version>1.0.3</version></project>",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def tool_dir(tmp_path: Path) -> Path:
    path = tmp_path / "tools"
    path.mkdir()
    return path


@pytest.fixture
def make_signing_config(tmp_path: Path, tool_dir: Path) -> Callable[..., SigningConfig]:
    """Factory fixture: a SigningConfig running one of the fake signing tools."""
    scripts = {
        "ok": _FAKE_SIGNER,
        "fail": _FAILING_SIGNER,
        "hang": _HANGING_SIGNER,
        "strict": _STRICT_SIGNER,
        "garbled": _GARBLED_SIGNER,
    }

    def _factory(kind: str = "ok", **overrides) -> SigningConfig:
        script = tool_dir / f"sign_{kind}.py"
        script.write_text(scripts[kind], encoding="utf-8")
        defaults = {
            "command": (sys.executable, str(script)),
            "timeout_seconds": 20.0,
            "state_path": tmp_path / "state" / "signatures.json",
        }
        defaults.update(overrides)
        return SigningConfig(**defaults)

    return _factory


@pytest.fixture
def signing_config(make_signing_config: Callable[..., SigningConfig]) -> SigningConfig:
    return make_signing_config()


@pytest.fixture
def sign_calls(tool_dir: Path) -> Callable[[], list[str]]:
    """Return a reader for the paths the fake signer was invoked with."""

    def _read() -> list[str]:
        log = tool_dir / "calls.log"
        if not log.exists():
            return []
        return log.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture
def packaging_config(
    tmp_path: Path,
    staging: Path,
    coordinate: RepositoryCoordinate,
    signing_config: SigningConfig,
) -> PackagingConfig:
    return PackagingConfig(
        coordinate=coordinate,
        staging_root=staging,
        output_dir=tmp_path / "distributions",
        signing=signing_config,
        local_repository=tmp_path / "m2",
    )
