"""Configuration schemas for building, signing and uploading a release.

Example ``publishing.yaml``:

    ```yaml
    project_name: easy-di
    description: "Easy dependency injection"
    url: "https://github.com/lestard/EasyDI"
    scm: "scm:git:https://github.com/lestard/EasyDI.git"
    license:
      name: "MIT License"
      url: "https://opensource.org/licenses/MIT"
    developer:
      id: lestard
      name: lestard
    repository:
      release_url: "https://repo.example.org/releases/"
      snapshot_url: "https://repo.example.org/snapshots/"
      username: "${PUBLISH_USERNAME:}"
      password: "${PUBLISH_PASSWORD:}"
    signing:
      key_id: "${SIGNING_KEY_ID:}"
      passphrase: "${SIGNING_PASSPHRASE:}"
    ```
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from easy_di import __version__


class BaseSchema(BaseModel):
    """Base for all publishing schemas; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class LicenseConfig(BaseSchema):
    name: str
    url: str
    distribution: str = "repo"


class DeveloperConfig(BaseSchema):
    id: str
    name: str


class RepositoryConfig(BaseSchema):
    """Target repositories. Credentials are expected from the environment."""

    release_url: str
    snapshot_url: str
    snapshot_suffix: str = Field(
        default="SNAPSHOT",
        min_length=1,
        description="Version suffix that marks a pre-release",
    )
    username: Optional[str] = None
    password: Optional[SecretStr] = None


class SigningConfig(BaseSchema):
    key_id: Optional[str] = None
    passphrase: Optional[SecretStr] = None
    gpg_binary: str = "gpg"


class PublicationConfig(BaseSchema):
    """Metadata and targets of one release of the library."""

    project_name: str
    version: str = Field(
        default=__version__,
        description="Defaults to the version of the installed easy_di package",
    )
    description: str
    url: str
    scm: str
    license: LicenseConfig
    developer: DeveloperConfig
    repository: RepositoryConfig
    signing: SigningConfig = Field(default_factory=SigningConfig)
    dist_dir: str = "dist"
    docs_dir: str = "docs/_build/html"
    docs_package: str = Field(
        default="easy_di",
        description="Package whose API documentation is generated into docs_dir",
    )

    @property
    def distribution_name(self) -> str:
        """Project name normalized the way wheel and sdist file names spell it."""
        return self.project_name.replace("-", "_").lower()
