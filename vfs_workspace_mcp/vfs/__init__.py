"""In-memory virtual file system shared by the editor, the shell and the agent tools."""

from .errors import VfsErrorKind, VfsInvariantError, VfsResult
from .events import VfsChange, VfsChangeKind
from .nodes import DirectoryNode, FileNode, Node
from .paths import ROOT, normalize_path, resolve_path
from .selection import ActiveSelection
from .store import VfsStore
from .tree import deep_copy, find_node, find_parent_and_name, tree_from_files

__all__ = [
    "ROOT",
    "ActiveSelection",
    "DirectoryNode",
    "FileNode",
    "Node",
    "VfsChange",
    "VfsChangeKind",
    "VfsErrorKind",
    "VfsInvariantError",
    "VfsResult",
    "VfsStore",
    "deep_copy",
    "find_node",
    "find_parent_and_name",
    "normalize_path",
    "resolve_path",
    "tree_from_files",
]
