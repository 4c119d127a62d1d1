"""Building, signing and uploading releases of the library."""

from .api_docs_generator import ApiDocsGenerator
from .artifact_signer import ArtifactSigner
from .config_loader import PublicationConfigLoader
from .docs_archive_builder import DocsArchiveBuilder
from .publication import Artifact, ArtifactKind, Publication, PublicationPlanner
from .publication_config import (
    DeveloperConfig,
    LicenseConfig,
    PublicationConfig,
    RepositoryConfig,
    SigningConfig,
)
from .publication_error import PublicationError
from .repository_selector import is_snapshot_version, select_repository_url
from .repository_uploader import RepositoryUploader

__all__ = [
    "ApiDocsGenerator",
    "Artifact",
    "ArtifactKind",
    "ArtifactSigner",
    "DeveloperConfig",
    "DocsArchiveBuilder",
    "LicenseConfig",
    "Publication",
    "PublicationConfig",
    "PublicationConfigLoader",
    "PublicationError",
    "PublicationPlanner",
    "RepositoryConfig",
    "RepositoryUploader",
    "SigningConfig",
    "is_snapshot_version",
    "select_repository_url",
]
