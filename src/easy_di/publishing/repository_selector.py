"""Selection of the target repository for a version."""
import re

from easy_di.publishing.publication_config import RepositoryConfig

_DEV_RELEASE_PATTERN = re.compile(r"\.dev\d*$")


def is_snapshot_version(version: str, snapshot_suffix: str = "SNAPSHOT") -> bool:
    """
    Check if a version string marks a pre-release.

    Both the plain suffix (``0.7.0-SNAPSHOT``) and PEP 440 development
    releases (``0.7.0.dev0``) count as snapshots.
    """
    version = version.strip()
    return version.endswith(snapshot_suffix) or bool(_DEV_RELEASE_PATTERN.search(version))


def select_repository_url(version: str, repository: RepositoryConfig) -> str:
    """Return the snapshot URL for snapshot versions and the release URL otherwise."""
    if is_snapshot_version(version, repository.snapshot_suffix):
        return repository.snapshot_url
    return repository.release_url
