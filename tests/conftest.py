"""
Shared test fixtures for easy-di tests.

This module provides a fresh container per test, a publication
configuration pointing into a temporary dist directory, and a helper to
inspect chained resolution errors.
"""

from pathlib import Path
from typing import Optional

import pytest

from easy_di.container.easy_di import EasyDI
from easy_di.publishing.publication_config import PublicationConfig


def error_chain_text(error: Optional[BaseException]) -> str:
    """Concatenate the messages of an exception and all of its causes."""
    messages = []
    while error is not None:
        messages.append(str(error))
        error = error.__cause__
    return "\n".join(messages)


@pytest.fixture
def easy_di() -> EasyDI:
    """Create a fresh container for each test."""
    return EasyDI()


@pytest.fixture
def publication_config(tmp_path: Path) -> PublicationConfig:
    """Provide a release configuration whose dist and docs dirs live in tmp_path."""
    return PublicationConfig.model_validate(
        {
            "project_name": "easy-di",
            "version": "0.6.0",
            "description": "Easy dependency injection",
            "url": "https://github.com/lestard/EasyDI",
            "scm": "scm:git:https://github.com/lestard/EasyDI.git",
            "license": {"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
            "developer": {"id": "lestard", "name": "lestard"},
            "repository": {
                "release_url": "https://repo.example.org/releases/",
                "snapshot_url": "https://repo.example.org/snapshots/",
                "username": "deployer",
                "password": "s3cret",
            },
            "signing": {"key_id": "ABCDEF12", "passphrase": "phrase"},
            "dist_dir": str(tmp_path / "dist"),
            "docs_dir": str(tmp_path / "docs"),
        }
    )


@pytest.fixture
def populated_dist(publication_config: PublicationConfig) -> Path:
    """Provide a dist directory holding wheel, sdist and docs archive."""
    dist_dir = Path(publication_config.dist_dir)
    dist_dir.mkdir(parents=True)
    (dist_dir / "easy_di-0.6.0-py3-none-any.whl").write_bytes(b"wheel")
    (dist_dir / "easy_di-0.6.0.tar.gz").write_bytes(b"sdist")
    (dist_dir / "easy_di-0.6.0-docs.zip").write_bytes(b"docs")
    return dist_dir
