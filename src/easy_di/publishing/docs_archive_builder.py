import logging
import zipfile
from pathlib import Path

from easy_di.publishing.publication_config import PublicationConfig
from easy_di.publishing.publication_error import PublicationError

logger = logging.getLogger(__name__)


class DocsArchiveBuilder:
    """Packs the built HTML documentation into ``{name}-{version}-docs.zip``."""

    def __init__(self, config: PublicationConfig) -> None:
        self._config = config

    def archive_path(self) -> Path:
        name = self._config.distribution_name
        return Path(self._config.dist_dir) / f"{name}-{self._config.version}-docs.zip"

    def build(self) -> Path:
        docs_dir = Path(self._config.docs_dir)
        if not docs_dir.is_dir():
            raise PublicationError(f"Documentation directory not found: {docs_dir}")

        files = sorted(p for p in docs_dir.rglob("*") if p.is_file())
        if not files:
            raise PublicationError(f"Documentation directory is empty: {docs_dir}")

        archive = self.archive_path()
        archive.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for file in files:
                zf.write(file, arcname=file.relative_to(docs_dir).as_posix())

        logger.info(f"Built documentation archive {archive} ({len(files)} files)")
        return archive
