"""The stateful owner of the virtual file system tree."""

import logging
from collections.abc import Callable, Iterator

from .errors import VfsResult
from .events import VfsChange, VfsChangeKind
from .nodes import DirectoryNode, FileNode, Node
from .paths import ROOT, base_name, is_within, join_path, normalize_path, parent_path
from .selection import ActiveSelection
from .tree import deep_copy, find_node, find_parent_and_name, iter_files, render_outline, replace_at

logger = logging.getLogger(__name__)

ChangeListener = Callable[[VfsChange], None]


class VfsStore:
    """
    Owns one tree and applies every mutation to it.

    Each operation reads the current tree, validates the request and then
    either publishes a new tree value or leaves the current one untouched.
    Trees are immutable, so a snapshot taken from ``tree`` stays valid for
    as long as a reader holds on to it. Operations run to completion one at
    a time; calls issued back to back each observe the previous result.

    Paths are canonicalized on entry, so ``README.md`` and ``/README.md``
    address the same node.
    """

    def __init__(self, tree: DirectoryNode | None = None, active_file: str | None = None) -> None:
        self._tree = tree if tree is not None else DirectoryNode()
        self._selection = ActiveSelection(normalize_path(active_file) if active_file else None)
        self._listeners: list[ChangeListener] = []

    @property
    def tree(self) -> DirectoryNode:
        """The current tree snapshot."""
        return self._tree

    @property
    def active_file(self) -> str | None:
        return self._selection.path

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Registers ``listener`` for change notifications and returns its unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Queries ---

    def find_node(self, path: str) -> Node | None:
        return find_node(self._tree, normalize_path(path))

    def exists(self, path: str) -> bool:
        return self.find_node(path) is not None

    def is_file(self, path: str) -> bool:
        return isinstance(self.find_node(path), FileNode)

    def is_directory(self, path: str) -> bool:
        return isinstance(self.find_node(path), DirectoryNode)

    def read(self, path: str) -> str | None:
        """Returns the content of the file at ``path``, or ``None`` if there is no file there."""
        node = self.find_node(path)
        return node.content if isinstance(node, FileNode) else None

    def list_directory(self, path: str) -> list[str] | None:
        node = self.find_node(path)
        if not isinstance(node, DirectoryNode):
            return None
        return sorted(node.children)

    def structure(self, path: str = ROOT) -> str:
        node = self.find_node(path)
        if not isinstance(node, DirectoryNode):
            return ""
        return render_outline(node)

    def iter_files(self, path: str = ROOT) -> Iterator[tuple[str, str]]:
        canonical = normalize_path(path)
        node = find_node(self._tree, canonical)
        if node is None:
            return iter(())
        return iter_files(node, canonical)

    # --- Mutations ---

    def write(self, path: str, content: str) -> VfsResult:
        """
        Replaces the content of a file, creating the file if only it is missing.

        Missing intermediate directories are not created.
        """
        path = normalize_path(path)
        node = find_node(self._tree, path)
        if isinstance(node, DirectoryNode):
            return self._reject(VfsResult.invalid(f"Is a directory: {path}"))
        if node is None and find_parent_and_name(self._tree, path) is None:
            return self._reject(VfsResult.not_found(f"No such directory: {parent_path(path)}"))

        kind = VfsChangeKind.WRITTEN if node is not None else VfsChangeKind.CREATED
        self._commit(replace_at(self._tree, path, FileNode(content=content)), VfsChange(kind=kind, path=path))
        return VfsResult.ok()

    def create_file(self, path: str) -> VfsResult:
        return self._create(normalize_path(path), FileNode())

    def create_directory(self, path: str) -> VfsResult:
        return self._create(normalize_path(path), DirectoryNode())

    def create_tree(self, path: str, tree: DirectoryNode) -> VfsResult:
        """
        Grafts a whole directory tree at ``path`` in a single change.

        Follows the rules of ``create_directory``: ``path`` must not exist
        and its parent must. Either every node of ``tree`` appears or none.
        """
        return self._create(normalize_path(path), tree)

    def _create(self, path: str, node: Node) -> VfsResult:
        if find_node(self._tree, path) is not None:
            return self._reject(VfsResult.already_exists(f"File exists: {path}"))
        if find_parent_and_name(self._tree, path) is None:
            return self._reject(VfsResult.not_found(f"No such directory: {parent_path(path)}"))

        self._commit(replace_at(self._tree, path, node), VfsChange(kind=VfsChangeKind.CREATED, path=path))
        return VfsResult.ok()

    def delete(self, path: str) -> VfsResult:
        """Removes the node at ``path`` together with its whole subtree."""
        path = normalize_path(path)
        if path == ROOT:
            return self._reject(VfsResult.invalid("Cannot delete the root directory"))
        if find_node(self._tree, path) is None:
            return self._reject(VfsResult.not_found(f"No such file or directory: {path}"))

        self._commit(replace_at(self._tree, path, None), VfsChange(kind=VfsChangeKind.DELETED, path=path))
        return VfsResult.ok()

    def move(self, source: str, destination: str) -> VfsResult:
        """
        Moves a node, following ``mv`` semantics.

        If ``destination`` is an existing directory the node is moved into
        it under its own name. An existing node at the final destination is
        never overwritten. The active file follows the moved node.
        """
        source, destination = normalize_path(source), normalize_path(destination)
        if source == ROOT:
            return self._reject(VfsResult.invalid("Cannot move the root directory"))
        node = find_node(self._tree, source)
        if node is None:
            return self._reject(VfsResult.not_found(f"Source not found: {source}"))

        final = self._final_destination(source, destination)
        failure = self._check_destination(source, final, "move")
        if failure is not None:
            return self._reject(failure)

        tree = replace_at(self._tree, source, None)
        tree = replace_at(tree, final, node)
        self._commit(tree, VfsChange(kind=VfsChangeKind.MOVED, path=source, destination=final))
        return VfsResult.ok()

    def copy(self, source: str, destination: str) -> VfsResult:
        """Copies a node with the destination rules of ``move``; the source is left untouched."""
        source, destination = normalize_path(source), normalize_path(destination)
        node = find_node(self._tree, source)
        if node is None:
            return self._reject(VfsResult.not_found(f"Source not found: {source}"))
        if source == ROOT:
            return self._reject(VfsResult.invalid("Cannot copy the root directory"))

        final = self._final_destination(source, destination)
        failure = self._check_destination(source, final, "copy")
        if failure is not None:
            return self._reject(failure)

        self._commit(
            replace_at(self._tree, final, deep_copy(node)),
            VfsChange(kind=VfsChangeKind.COPIED, path=source, destination=final),
        )
        return VfsResult.ok()

    def rename(self, path: str, new_name: str) -> VfsResult:
        """
        Renames a node in place. Renaming to the current name is a no-op.

        Unlike ``move``, an existing node under the new name is never entered:
        renaming onto an existing directory fails with ``ALREADY_EXISTS``.
        """
        path = normalize_path(path)
        if path == ROOT:
            return self._reject(VfsResult.invalid("Cannot rename the root directory"))
        if not new_name or "/" in new_name or new_name in (".", ".."):
            return self._reject(VfsResult.invalid(f"Invalid name: '{new_name}'"))
        if new_name == base_name(path):
            return VfsResult.ok()

        new_path = join_path(parent_path(path), new_name)
        # Never fall into mv's "move into directory" rule when renaming.
        if find_node(self._tree, new_path) is not None:
            return self._reject(VfsResult.already_exists(f"Destination exists: {new_path}"))
        return self.move(path, new_path)

    def replace_all(self, tree: DirectoryNode) -> None:
        """Discards the current tree and installs ``tree`` in its place."""
        logger.info(f"Replacing the whole tree ({len(tree.children)} top-level entries)")
        self._commit(tree, VfsChange(kind=VfsChangeKind.REPLACED, path=ROOT))

    # --- Active file ---

    def select(self, path: str) -> bool:
        """Opens the file at ``path``. Only existing files can be selected."""
        path = normalize_path(path)
        if not isinstance(find_node(self._tree, path), FileNode):
            return False
        self._selection.select(path)
        return True

    def close(self) -> None:
        self._selection.close()

    # --- Internals ---

    def _final_destination(self, source: str, destination: str) -> str:
        if isinstance(find_node(self._tree, destination), DirectoryNode):
            return join_path(destination, base_name(source))
        return destination

    def _check_destination(self, source: str, final: str, verb: str) -> VfsResult | None:
        if find_node(self._tree, final) is not None:
            return VfsResult.already_exists(f"Destination exists: {final}")
        if is_within(final, source):
            return VfsResult.invalid(f"Cannot {verb} '{source}' into itself: {final}")
        if find_parent_and_name(self._tree, final) is None:
            return VfsResult.not_found(f"Cannot find destination parent for: {final}")
        return None

    def _reject(self, result: VfsResult) -> VfsResult:
        logger.debug(f"VFS operation rejected: {result.error}")
        return result

    def _commit(self, tree: DirectoryNode, change: VfsChange) -> None:
        self._tree = tree
        logger.debug(f"VFS {change.kind.value}: {change.path}" + (f" -> {change.destination}" if change.destination else ""))
        self._selection.apply(change, tree)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                logger.error(f"Change listener failed on {change.kind.value} {change.path}: {e}", exc_info=True)
