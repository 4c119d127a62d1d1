"""Publication model and the planner that assembles it from the dist directory."""
import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from easy_di.publishing.publication_config import PublicationConfig
from easy_di.publishing.publication_error import PublicationError
from easy_di.publishing.repository_selector import (
    is_snapshot_version,
    select_repository_url,
)

logger = logging.getLogger(__name__)


class ArtifactKind(Enum):
    PRIMARY = "primary"
    SOURCES = "sources"
    DOCS = "docs"
    METADATA = "metadata"


@dataclass
class Artifact:
    kind: ArtifactKind
    path: Path
    signature: Optional[Path] = None

    @property
    def files(self) -> List[Path]:
        """The artifact itself followed by its signature, if signed."""
        return [self.path] + ([self.signature] if self.signature else [])


@dataclass
class Publication:
    """Everything that goes into one upload: artifacts, metadata and target."""

    config: PublicationConfig
    repository_url: str
    artifacts: List[Artifact] = field(default_factory=list)

    @property
    def is_snapshot(self) -> bool:
        return is_snapshot_version(self.config.version, self.config.repository.snapshot_suffix)

    @property
    def is_signed(self) -> bool:
        return bool(self.artifacts) and all(a.signature is not None for a in self.artifacts)

    def artifact(self, kind: ArtifactKind) -> Artifact:
        for artifact in self.artifacts:
            if artifact.kind is kind:
                return artifact
        raise PublicationError(f"Publication has no {kind.value} artifact")

    def metadata(self) -> Dict[str, Any]:
        """Project metadata shipped alongside the artifacts."""
        config = self.config
        return {
            "name": config.project_name,
            "version": config.version,
            "description": config.description,
            "url": config.url,
            "license": config.license.model_dump(),
            "developer": config.developer.model_dump(),
            "scm": {
                "connection": config.scm,
                "developer_connection": config.scm,
                "url": config.url,
            },
        }


class PublicationPlanner:
    """
    Collects the artifacts of a release from the dist directory.

    A publication always consists of exactly one primary artifact (the
    wheel), one sources archive (the sdist) and one documentation archive.
    The project metadata is written next to them as ``{name}-{version}.json``
    and published as a fourth artifact.
    """

    def __init__(self, config: PublicationConfig) -> None:
        self._config = config

    def artifact_patterns(self) -> Dict[ArtifactKind, str]:
        name = self._config.distribution_name
        version = self._config.version
        return {
            ArtifactKind.PRIMARY: f"{name}-{version}-*.whl",
            ArtifactKind.SOURCES: f"{name}-{version}.tar.gz",
            ArtifactKind.DOCS: f"{name}-{version}-docs.zip",
        }

    def metadata_path(self) -> Path:
        name = self._config.distribution_name
        return Path(self._config.dist_dir) / f"{name}-{self._config.version}.json"

    def plan(self) -> Publication:
        dist_dir = Path(self._config.dist_dir)
        if not dist_dir.is_dir():
            raise PublicationError(f"Dist directory not found: {dist_dir}")

        artifacts = [
            Artifact(kind=kind, path=self._find_single(dist_dir, kind, pattern))
            for kind, pattern in self.artifact_patterns().items()
        ]

        repository_url = select_repository_url(self._config.version, self._config.repository)
        publication = Publication(
            config=self._config,
            repository_url=repository_url,
            artifacts=artifacts,
        )
        publication.artifacts.append(
            Artifact(kind=ArtifactKind.METADATA, path=self._write_metadata(publication))
        )
        logger.info(
            f"Planned publication of {self._config.project_name} {self._config.version} "
            f"({len(artifacts)} artifacts) to {repository_url}"
        )
        return publication

    @staticmethod
    def _find_single(dist_dir: Path, kind: ArtifactKind, pattern: str) -> Path:
        matches = sorted(dist_dir.glob(pattern))
        if len(matches) != 1:
            raise PublicationError(
                f"Expected exactly one {kind.value} artifact matching '{pattern}' in "
                f"{dist_dir}, found {len(matches)}"
            )
        return matches[0]

    def _write_metadata(self, publication: Publication) -> Path:
        path = self.metadata_path()
        path.write_text(json.dumps(publication.metadata(), indent=2) + "\n", encoding="utf-8")
        logger.debug(f"Wrote publication metadata {path}")
        return path
