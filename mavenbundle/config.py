"""Environment-driven defaults for the ``mavenbundle`` CLI.

Centralized settings using pydantic-settings. Reads from a .env file and
MAVENBUNDLE_* environment variables; CLI options override them. The
pipeline itself never reads these; the CLI turns them into an explicit
``PackagingConfig``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from mavenbundle.models.config import SignatureFreshness


class BundleSettings(BaseSettings):
    """Packaging defaults with environment variable overrides.

    Examples
    --------
    Override via environment::

        export MAVENBUNDLE_LOG_LEVEL=DEBUG
        export MAVENBUNDLE_GPG_KEY_ID=0xDEADBEEF
        export MAVENBUNDLE_SIGN=false

    Or via .env file::

        MAVENBUNDLE_STAGING_ROOT=build/publications/release
        MAVENBUNDLE_SIGNATURE_FRESHNESS=content-hash
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MAVENBUNDLE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Paths
    staging_root: Path = Path("build/publications/release")
    output_dir: Path = Path("build/distributions")
    local_repository: Path = Path.home() / ".m2" / "repository"
    state_path: Path = Path(".mavenbundle/signatures.json")

    # Checksums
    algorithms: list[str] = ["SHA-1", "MD5"]

    # Signing
    sign: bool = True
    gpg_command: list[str] = ["gpg", "--yes", "-ab"]
    gpg_key_id: str = ""
    sign_timeout_seconds: float = 120.0
    signature_freshness: SignatureFreshness = SignatureFreshness.MTIME


# Module-level singleton — import as `from mavenbundle.config import settings`
settings = BundleSettings()
