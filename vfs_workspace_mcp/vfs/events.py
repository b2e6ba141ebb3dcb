"""Change notifications published by the VFS store."""

from enum import Enum

from pydantic import BaseModel


class VfsChangeKind(str, Enum):
    CREATED = "created"
    WRITTEN = "written"
    DELETED = "deleted"
    MOVED = "moved"
    COPIED = "copied"
    REPLACED = "replaced"


class VfsChange(BaseModel):
    """A successfully applied mutation.

    ``destination`` is the final path of a move or copy (after resolving a
    destination directory), ``None`` for every other kind.
    """

    kind: VfsChangeKind
    path: str
    destination: str | None = None
