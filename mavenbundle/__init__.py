"""mavenbundle: release packaging for Maven-layout distributions.

Takes the outputs of a build (library jar, sources jar, javadoc jar,
generated pom, optional repository metadata) and:
  - writes SHA-1 and MD5 checksum sidecars for every staged file
  - creates detached GPG signatures only where they are missing or stale
  - assembles a ``groupPath/artifactId/version`` zip ready for upload
"""

__version__ = "0.1.0"

from mavenbundle.core.archiver import RenameRule, RepositoryArchiver
from mavenbundle.core.collector import ArtifactCollector
from mavenbundle.core.pipeline import ReleasePipeline
from mavenbundle.core.signer import SignatureManager
from mavenbundle.models.config import PackagingConfig, SigningConfig
from mavenbundle.models.coordinates import RepositoryCoordinate

__all__ = [
    "ArtifactCollector",
    "PackagingConfig",
    "ReleasePipeline",
    "RenameRule",
    "RepositoryArchiver",
    "RepositoryCoordinate",
    "SignatureManager",
    "SigningConfig",
    "__version__",
]
