"""HTML API documentation for a package, rendered with :mod:`pydoc`."""
import html
import importlib
import logging
import pkgutil
import pydoc
from pathlib import Path
from types import ModuleType
from typing import List

from easy_di.publishing.publication_config import PublicationConfig
from easy_di.publishing.publication_error import PublicationError

logger = logging.getLogger(__name__)


class ApiDocsGenerator:
    """
    Writes one ``{module}.html`` page per module of ``docs_package`` into
    ``docs_dir``, plus an ``index.html`` linking them.

    Page names follow pydoc's own cross references, so links between modules
    resolve inside the archive.
    """

    def __init__(self, config: PublicationConfig) -> None:
        self._config = config
        self._renderer = pydoc.HTMLDoc()

    def generate(self) -> List[Path]:
        modules = self._collect_modules(self._config.docs_package)
        docs_dir = Path(self._config.docs_dir)
        docs_dir.mkdir(parents=True, exist_ok=True)

        pages = [self._write_page(docs_dir, module) for module in modules]
        pages.append(self._write_index(docs_dir, modules))

        logger.info(f"Generated API documentation for {len(modules)} modules in {docs_dir}")
        return pages

    @staticmethod
    def _collect_modules(package_name: str) -> List[ModuleType]:
        try:
            package = importlib.import_module(package_name)
        except ImportError as e:
            raise PublicationError(f"Package {package_name} can't be imported: {e}") from e

        modules = [package]
        if hasattr(package, "__path__"):
            for info in pkgutil.walk_packages(package.__path__, prefix=f"{package_name}."):
                if info.name.rsplit(".", 1)[-1] == "__main__":
                    continue
                try:
                    modules.append(importlib.import_module(info.name))
                except ImportError as e:
                    raise PublicationError(f"Module {info.name} can't be imported: {e}") from e
        return sorted(modules, key=lambda m: m.__name__)

    def _write_page(self, docs_dir: Path, module: ModuleType) -> Path:
        page = self._renderer.page(
            pydoc.describe(module), self._renderer.document(module, module.__name__)
        )
        path = docs_dir / f"{module.__name__}.html"
        path.write_text(page, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        return path

    def _write_index(self, docs_dir: Path, modules: List[ModuleType]) -> Path:
        links = "\n".join(
            f'<li><a href="{m.__name__}.html">{html.escape(m.__name__)}</a></li>' for m in modules
        )
        title = html.escape(f"{self._config.project_name} {self._config.version} API")
        path = docs_dir / "index.html"
        contents = f"<h1>{title}</h1>\n<ul>\n{links}\n</ul>"
        path.write_text(self._renderer.page(title, contents), encoding="utf-8")
        return path
