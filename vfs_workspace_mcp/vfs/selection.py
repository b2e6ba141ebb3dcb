"""Tracking of the file currently open in the editor."""

import logging

from .events import VfsChange, VfsChangeKind
from .nodes import DirectoryNode, FileNode
from .paths import ROOT, is_within, join_path

logger = logging.getLogger(__name__)


class ActiveSelection:
    """
    Holds the single "open" file path and keeps it consistent with the tree.

    The selection is either open on a canonical path or closed (``None``).
    Besides explicit ``select``/``close`` calls it only changes in response
    to deletes, moves and whole-tree replacements.
    """

    def __init__(self, path: str | None = None) -> None:
        self._path = path

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._path is not None

    def select(self, path: str) -> None:
        logger.debug(f"Active file selected: {path}")
        self._path = path

    def close(self) -> None:
        self._path = None

    def apply(self, change: VfsChange, tree: DirectoryNode) -> None:
        """Updates the selection after ``change`` has been applied to ``tree``."""
        match change.kind:
            case VfsChangeKind.DELETED:
                self._on_deleted(change.path)
            case VfsChangeKind.MOVED:
                self._on_moved(change.path, change.destination or change.path)
            case VfsChangeKind.REPLACED:
                self._on_replaced(tree)
            case _:
                pass

    def _on_deleted(self, path: str) -> None:
        if self._path is not None and path != ROOT and is_within(self._path, path):
            logger.debug(f"Active file {self._path} removed with {path}, closing it")
            self._path = None

    def _on_moved(self, source: str, destination: str) -> None:
        if self._path is None:
            return
        if self._path == source:
            self._path = destination
        elif self._path.startswith(source + "/"):
            self._path = destination + self._path[len(source):]
        else:
            return
        logger.debug(f"Active file now at {self._path}")

    def _on_replaced(self, tree: DirectoryNode) -> None:
        readme = next(
            (
                name
                for name, node in tree.children.items()
                if isinstance(node, FileNode) and name.lower().startswith("readme")
            ),
            None,
        )
        self._path = join_path(ROOT, readme) if readme else None
