"""Loader for ``publishing.yaml`` with ``.env`` support and secret substitution."""
import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from easy_di.publishing.publication_config import PublicationConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV_VAR = "EASY_DI_PUBLISHING_CONFIG"
DEFAULT_CONFIG_FILE = "publishing.yaml"

# ${NAME} or ${NAME:default}
PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class PublicationConfigLoader:
    """
    Loads the publication configuration.

    Reads ``.env``, then the YAML file, expands environment placeholders and
    validates the result.
    """

    @staticmethod
    def load_config(path: Optional[str] = None) -> PublicationConfig:
        """
        Load the publication configuration.

        Args:
            path: Path to the YAML file. Falls back to the
                ``EASY_DI_PUBLISHING_CONFIG`` environment variable and then to
                ``publishing.yaml`` in the working directory.

        Returns:
            The validated configuration

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ValueError: If a required secret is missing from the environment
        """
        PublicationConfigLoader._load_dotenv()

        config_path = Path(path or os.environ.get(CONFIG_PATH_ENV_VAR) or DEFAULT_CONFIG_FILE)
        if not config_path.exists():
            raise FileNotFoundError(f"Publication configuration not found: {config_path}")

        logger.info(f"Loading publication config from {config_path}")
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        data = _expand_placeholders(data)
        return PublicationConfig.model_validate(data)

    @staticmethod
    def _load_dotenv() -> None:
        """Load ``.env`` from the working directory without overriding existing variables."""
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file, override=False)
            logger.debug(f"Loaded .env file: {env_file}")


def _placeholder_value(match: "re.Match[str]") -> str:
    name, default = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    if default is None:
        raise ValueError(f"Environment variable '{name}' is required by the publication config")
    logger.debug(f"{name} not set, using default")
    return default


def _expand_placeholders(node: Any) -> Any:
    """Expand ``${NAME}`` and ``${NAME:default}`` in every string of a parsed YAML tree."""
    if isinstance(node, str):
        return PLACEHOLDER_PATTERN.sub(_placeholder_value, node)
    if isinstance(node, dict):
        return {key: _expand_placeholders(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_expand_placeholders(item) for item in node]
    return node
