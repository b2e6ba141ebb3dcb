"""Resolution of user supplied path tokens into canonical absolute paths.

A canonical path starts with ``/``, has no empty, ``.`` or ``..`` segments
and no trailing ``/`` (the root itself is exactly ``/``).
"""

ROOT = "/"


def normalize_path(path: str) -> str:
    """Canonicalize ``path``, treating it as absolute."""
    stack: list[str] = []
    for part in path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            # Never climbs above the root.
            if stack:
                stack.pop()
        else:
            stack.append(part)
    return ROOT + "/".join(stack)


def resolve_path(cwd: str, target: str) -> str:
    """
    Resolves a path token against a working directory.

    Args:
        cwd: The canonical absolute working directory.
        target: The path as typed by the user or the agent. May be absolute
            or relative and may contain ``.`` and ``..`` segments.

    Returns:
        The canonical absolute path. Resolution never fails; whether the
        path exists is for the caller to check.
    """
    if not target:
        return cwd
    if target.startswith("/"):
        return normalize_path(target)
    combined = target if cwd == ROOT else f"{cwd}/{target}"
    return normalize_path(combined)


def split_path(path: str) -> list[str]:
    """Returns the segments of a canonical path (empty for the root)."""
    return [part for part in path.split("/") if part]


def join_path(parent: str, name: str) -> str:
    return f"/{name}" if parent == ROOT else f"{parent}/{name}"


def parent_path(path: str) -> str:
    parts = split_path(path)
    return ROOT + "/".join(parts[:-1])


def base_name(path: str) -> str:
    parts = split_path(path)
    return parts[-1] if parts else ""


def is_within(path: str, ancestor: str) -> bool:
    """True if ``path`` equals ``ancestor`` or is nested under it."""
    if ancestor == ROOT:
        return True
    return path == ancestor or path.startswith(ancestor + "/")


def display_path(path: str) -> str:
    """Root-relative form used in agent-facing listings (``.`` for the root)."""
    return path.lstrip("/") or "."
