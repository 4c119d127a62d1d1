import logging
from pathlib import Path
from typing import List

import requests

from easy_di.publishing.publication import Publication
from easy_di.publishing.publication_config import RepositoryConfig
from easy_di.publishing.publication_error import PublicationError

logger = logging.getLogger(__name__)


class RepositoryUploader:
    """
    Uploads a publication to its repository with HTTP PUT.

    Files are placed at ``{repository_url}/{project_name}/{version}/{file}``;
    credentials are sent with basic auth.
    """

    def __init__(self, repository: RepositoryConfig, timeout: float = 60.0) -> None:
        self._repository = repository
        self._timeout = timeout

    def upload(self, publication: Publication) -> List[str]:
        username = self._repository.username
        password = self._repository.password.get_secret_value() if self._repository.password else ""
        if not username or not password:
            raise PublicationError(
                "Repository credentials are missing. Set repository.username and "
                "repository.password (e.g. via ${PUBLISH_USERNAME} and ${PUBLISH_PASSWORD})."
            )

        uploaded: List[str] = []
        for artifact in publication.artifacts:
            for file in artifact.files:
                url = self.target_url(publication, file)
                self._put(url, file, (username, password))
                uploaded.append(url)

        logger.info(f"Uploaded {len(uploaded)} files to {publication.repository_url}")
        return uploaded

    @staticmethod
    def target_url(publication: Publication, file: Path) -> str:
        base = publication.repository_url.rstrip("/")
        config = publication.config
        return f"{base}/{config.project_name}/{config.version}/{file.name}"

    def _put(self, url: str, file: Path, auth: tuple) -> None:
        logger.debug(f"Uploading {file} to {url}")
        try:
            with open(file, "rb") as f:
                response = requests.put(url, data=f, auth=auth, timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise PublicationError(f"Upload of {file.name} to {url} failed: {e}") from e
