from __future__ import annotations

"""High-level document loading service.

Entry-point for any front-end (CLI, host integration) that needs to load
markup documents from disk, keep their node trees available and hot-reload
them when the files change. Conversion itself is delegated to
:func:`html_tailwind.core.converter.convert`; this module only adds file
access, caching and the reload/swap policy.
"""

from dataclasses import dataclass
import hashlib
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from html_tailwind.config import ConfigManager
from html_tailwind.core.converter import convert
from html_tailwind.core.exceptions import DocumentIOError, DocumentLoadError
from html_tailwind.core.loader import ResourceLoader
from html_tailwind.core.style_resolver import StyleResolver
from html_tailwind.core.tree import NodeTree

logger = logging.getLogger(__name__)

__all__ = ["ResourceHandle", "FileResourceLoader", "DocumentHandle", "DocumentService"]


@dataclass(frozen=True)
class ResourceHandle:
    """Handle issued by :class:`FileResourceLoader`: the resolved resource path."""

    path: str

    def __str__(self) -> str:
        return self.path


class FileResourceLoader:
    """Filesystem implementation of :class:`~html_tailwind.core.loader.ResourceLoader`."""

    def __init__(self, document_path: str | Path, resolve_relative: bool = True) -> None:
        self.document_path = Path(document_path)
        self.resolve_relative = resolve_relative

    def read_all_bytes(self) -> bytes:
        return self.document_path.read_bytes()

    def load_resource(self, path: str) -> ResourceHandle:
        resource = Path(path)
        if self.resolve_relative and not resource.is_absolute():
            resource = self.document_path.parent / resource
        return ResourceHandle(resource.as_posix())


class DocumentHandle:
    """Reference to a loaded document shared by all of its consumers.

    ``tree`` always points at the latest successfully converted tree; a
    reload swaps it in one assignment and never patches the old tree.
    """

    def __init__(self, path: Path, tree: NodeTree, digest: str) -> None:
        self.path = path
        self._tree = tree
        self.digest = digest
        self.generation = 1

    @property
    def tree(self) -> NodeTree:
        return self._tree

    def _swap(self, tree: NodeTree, digest: str) -> None:
        self._tree = tree
        self.digest = digest
        self.generation += 1

    def __repr__(self) -> str:
        return f"DocumentHandle(path={str(self.path)!r}, generation={self.generation})"


LoaderFactory = Callable[[Path, bool], ResourceLoader]


class DocumentService:
    """Loads documents from disk and keeps their trees current."""

    def __init__(self, loader_config: Optional[Mapping[str, Any]] = None,
                 resolver: Optional[StyleResolver] = None,
                 loader_factory: Optional[LoaderFactory] = None) -> None:
        if loader_config is None:
            loader_config = ConfigManager().get_loader_config()
        self.extensions = {
            str(ext).lower().lstrip(".") for ext in loader_config.get("extensions", ["html", "xml"])
        }
        self.hot_reload = bool(loader_config.get("hot_reload", True))
        self.resolve_relative = bool(loader_config.get("resolve_relative_to_document", True))
        self.resolver = resolver or StyleResolver()
        self._loader_factory: LoaderFactory = loader_factory or FileResourceLoader
        self._documents: Dict[Path, DocumentHandle] = {}

    # ---------------------------------------------------------------------
    # PUBLIC API
    # ---------------------------------------------------------------------
    def load(self, path: str | Path) -> DocumentHandle:
        """Return the handle for *path*, converting the document on first use.

        Raises:
            DocumentIOError: If the suffix is not accepted or the file cannot
                be read
            DocumentLoadError: Any other fatal conversion error
        """
        key = self._key(path)
        handle = self._documents.get(key)
        if handle is not None:
            return handle

        tree, digest = self._convert(key)
        handle = DocumentHandle(key, tree, digest)
        self._documents[key] = handle
        logger.info("Loaded document %s", key)
        return handle

    def reload(self, path: str | Path) -> DocumentHandle:
        """Re-run the pipeline for *path* and swap the new tree in.

        On failure the previous tree stays in place and the error is raised.
        """
        key = self._key(path)
        handle = self._documents.get(key)
        if handle is None:
            return self.load(key)

        try:
            tree, digest = self._convert(key)
        except DocumentLoadError:
            logger.error("Reload of %s failed; keeping previous tree", key)
            raise
        handle._swap(tree, digest)
        logger.info("Document hot-reloaded: %s (generation %d)", key, handle.generation)
        return handle

    def refresh(self) -> List[DocumentHandle]:
        """Reload every document whose bytes changed since the last load.

        Returns the handles that received a new tree. Failures are logged and
        leave the previous tree in place.
        """
        if not self.hot_reload:
            return []

        reloaded: List[DocumentHandle] = []
        for key, handle in list(self._documents.items()):
            try:
                digest = _digest(self._loader(key).read_all_bytes())
            except OSError as exc:
                logger.warning("Cannot read %s for hot reload: %s", key, exc)
                continue
            if digest == handle.digest:
                continue
            try:
                reloaded.append(self.reload(key))
            except DocumentLoadError as exc:
                logger.error("Hot reload failed for %s: %s", key, exc)
        return reloaded

    def get(self, path: str | Path) -> Optional[DocumentHandle]:
        return self._documents.get(self._key(path))

    def unload(self, path: str | Path) -> None:
        self._documents.pop(self._key(path), None)

    def loaded_paths(self) -> List[Path]:
        return list(self._documents)

    # ---------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------
    def _key(self, path: str | Path) -> Path:
        key = Path(path).resolve()
        suffix = key.suffix.lower().lstrip(".")
        if suffix not in self.extensions:
            raise DocumentIOError(
                f"Unsupported document extension '.{suffix}' (accepted: {sorted(self.extensions)})",
                str(key),
            )
        return key

    def _loader(self, key: Path) -> ResourceLoader:
        return self._loader_factory(key, self.resolve_relative)

    def _convert(self, key: Path) -> tuple[NodeTree, str]:
        loader = self._loader(key)
        try:
            data = loader.read_all_bytes()
        except OSError as exc:
            raise DocumentIOError(f"Could not read document: {exc}", str(key), cause=exc) from exc
        tree = convert(data, loader, self.resolver, source=str(key))
        return tree, _digest(data)


def _digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()
