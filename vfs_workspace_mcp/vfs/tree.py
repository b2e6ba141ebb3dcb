"""Pure functions over immutable VFS trees.

Lookups walk canonical paths from the root. Updates use path copying: only
the directories on the spine from the root to the changed parent are
rebuilt, every other subtree is shared with the previous tree value.
"""

from collections.abc import Iterator, Mapping

from .errors import VfsInvariantError
from .nodes import DirectoryNode, FileNode, Node
from .paths import ROOT, join_path, split_path


def _segments(path: str) -> list[str]:
    parts = split_path(path)
    if any(part in (".", "..") for part in parts):
        raise VfsInvariantError(f"Path is not canonical: {path!r}")
    return parts


def find_node(tree: DirectoryNode, path: str) -> Node | None:
    """
    Locates the node at ``path``.

    Returns the tree itself for the root (``/`` or the empty string) and
    ``None`` if a segment is missing or an intermediate segment is a file.
    """
    current: Node = tree
    for part in _segments(path):
        if not isinstance(current, DirectoryNode):
            return None
        child = current.children.get(part)
        if child is None:
            return None
        current = child
    return current


def find_parent_and_name(tree: DirectoryNode, path: str) -> tuple[DirectoryNode, str] | None:
    """
    Locates the directory that holds (or would hold) ``path``.

    Returns ``None`` for the root, which has no parent, and when the prefix
    of ``path`` does not resolve to a directory.
    """
    parts = _segments(path)
    if not parts:
        return None
    name = parts.pop()
    parent = find_node(tree, ROOT + "/".join(parts))
    if not isinstance(parent, DirectoryNode):
        return None
    return parent, name


def deep_copy(node: Node) -> Node:
    """Returns a structurally independent copy of ``node``."""
    match node:
        case FileNode(content=content):
            return FileNode(content=content)
        case DirectoryNode(children=children):
            return DirectoryNode(children={name: deep_copy(child) for name, child in children.items()})
    raise VfsInvariantError(f"Unknown node type: {type(node).__name__}")


def replace_at(tree: DirectoryNode, path: str, node: Node | None) -> DirectoryNode:
    """
    Returns a new tree where the entry at ``path`` is ``node``.

    Passing ``None`` removes the entry. The parent of ``path`` must already
    exist; callers validate this before building the new tree.
    """
    parts = _segments(path)
    if not parts:
        raise VfsInvariantError("The root cannot be replaced through replace_at")
    return _replace_in(tree, parts, node, path)


def _replace_in(directory: DirectoryNode, parts: list[str], node: Node | None, path: str) -> DirectoryNode:
    head, rest = parts[0], parts[1:]
    children = dict(directory.children)
    if not rest:
        if node is None:
            children.pop(head, None)
        else:
            children[head] = node
        return DirectoryNode(children=children)

    child = children.get(head)
    if not isinstance(child, DirectoryNode):
        raise VfsInvariantError(f"Parent directory missing while updating {path!r}")
    children[head] = _replace_in(child, rest, node, path)
    return DirectoryNode(children=children)


def walk(node: Node, path: str = ROOT) -> Iterator[tuple[str, Node]]:
    """Yields ``(path, node)`` for ``node`` and its descendants, depth first, names sorted."""
    yield path, node
    if isinstance(node, DirectoryNode):
        for name in sorted(node.children):
            yield from walk(node.children[name], join_path(path, name))


def iter_files(node: Node, path: str = ROOT) -> Iterator[tuple[str, str]]:
    for file_path, child in walk(node, path):
        if isinstance(child, FileNode):
            yield file_path, child.content


def render_outline(directory: DirectoryNode, indent: str = "") -> str:
    """Renders a ``- name`` outline of a directory, two spaces per level."""
    lines: list[str] = []
    for name in sorted(directory.children):
        child = directory.children[name]
        lines.append(f"{indent}- {name}")
        if isinstance(child, DirectoryNode):
            nested = render_outline(child, indent + "  ")
            if nested:
                lines.append(nested)
    return "\n".join(lines)


def tree_from_files(files: Mapping[str, str]) -> DirectoryNode:
    """
    Builds a whole tree from a flat ``{path: content}`` mapping.

    Intermediate directories are created as needed. A key ending in ``/``
    denotes an empty directory and its value is ignored. Paths are taken as
    relative to the root whether or not they start with ``/``.
    """
    root: dict = {}
    for raw_path, content in files.items():
        parts = [part for part in raw_path.split("/") if part and part != "."]
        if not parts:
            continue
        is_dir = raw_path.endswith("/")
        directories = parts if is_dir else parts[:-1]
        cursor = root
        for part in directories:
            entry = cursor.setdefault(part, {})
            if not isinstance(entry, dict):
                raise ValueError(f"'{part}' is both a file and a directory in {raw_path!r}")
            cursor = entry
        if not is_dir:
            if isinstance(cursor.get(parts[-1]), dict):
                raise ValueError(f"'{raw_path}' is both a file and a directory")
            cursor[parts[-1]] = content
    return _freeze(root)


def _freeze(entries: dict) -> DirectoryNode:
    children: dict[str, Node] = {}
    for name, value in entries.items():
        children[name] = _freeze(value) if isinstance(value, dict) else FileNode(content=value)
    return DirectoryNode(children=children)
