import logging
import subprocess
from pathlib import Path
from typing import List

from easy_di.publishing.publication import Artifact, Publication
from easy_di.publishing.publication_config import SigningConfig
from easy_di.publishing.publication_error import PublicationError

logger = logging.getLogger(__name__)


class ArtifactSigner:
    """
    Signs every artifact of a publication with a detached ASCII-armoured
    signature (``<artifact>.asc``) using gpg.

    The key id and passphrase come from the signing configuration, which in
    turn reads them from the environment. The passphrase is passed to gpg on
    stdin.
    """

    def __init__(self, signing: SigningConfig) -> None:
        self._signing = signing

    def sign(self, publication: Publication) -> Publication:
        if not self._signing.key_id:
            raise PublicationError(
                "No signing key configured. Set signing.key_id (e.g. via ${SIGNING_KEY_ID})."
            )

        for artifact in publication.artifacts:
            artifact.signature = self._sign_artifact(artifact)

        logger.info(f"Signed {len(publication.artifacts)} artifacts with key {self._signing.key_id}")
        return publication

    def _sign_artifact(self, artifact: Artifact) -> Path:
        signature = artifact.path.with_name(artifact.path.name + ".asc")
        passphrase = (
            self._signing.passphrase.get_secret_value() if self._signing.passphrase else ""
        )

        try:
            result = subprocess.run(
                self._command(artifact.path, signature),
                input=passphrase,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise PublicationError(f"gpg binary not found: {self._signing.gpg_binary}") from e

        if result.returncode != 0:
            raise PublicationError(
                f"Signing {artifact.path.name} failed (exit code {result.returncode}): "
                f"{result.stderr.strip()}"
            )

        logger.debug(f"Created signature {signature}")
        return signature

    def _command(self, path: Path, signature: Path) -> List[str]:
        return [
            self._signing.gpg_binary,
            "--batch",
            "--yes",
            "--pinentry-mode",
            "loopback",
            "--passphrase-fd",
            "0",
            "--local-user",
            str(self._signing.key_id),
            "--armor",
            "--detach-sign",
            "--output",
            str(signature),
            str(path),
        ]
