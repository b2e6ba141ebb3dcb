"""Result and failure types shared by all VFS operations."""

from enum import Enum

from pydantic import BaseModel


class VfsErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_OPERATION = "invalid_operation"


class VfsInvariantError(Exception):
    """Raised when an internal invariant of the tree is violated.

    This signals a programming error, never a user-facing condition.
    """


class VfsResult(BaseModel):
    """Outcome of a mutating VFS operation.

    A result is truthy exactly when the operation succeeded, so callers that
    only care about success can write ``if store.create_file(path): ...``.
    """

    success: bool
    error: str | None = None
    kind: VfsErrorKind | None = None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls) -> "VfsResult":
        return cls(success=True)

    @classmethod
    def not_found(cls, error: str) -> "VfsResult":
        return cls(success=False, error=error, kind=VfsErrorKind.NOT_FOUND)

    @classmethod
    def already_exists(cls, error: str) -> "VfsResult":
        return cls(success=False, error=error, kind=VfsErrorKind.ALREADY_EXISTS)

    @classmethod
    def invalid(cls, error: str) -> "VfsResult":
        return cls(success=False, error=error, kind=VfsErrorKind.INVALID_OPERATION)
