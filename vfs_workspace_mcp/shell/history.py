class CommandHistory:
    """
    Entered command lines with a cursor for up/down navigation.

    The cursor ranges over ``-1 .. len(entries)``; ``len(entries)`` is the
    fresh empty line below the newest entry.
    """

    def __init__(self) -> None:
        self._entries: list[str] = []
        self._index = -1

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def push(self, line: str) -> None:
        if not line.strip():
            return
        self._entries.append(line)
        self._index = len(self._entries)

    def previous(self) -> str:
        """Moves the cursor up and returns the line under it."""
        self._index = max(-1, self._index - 1)
        return self._current()

    def next(self) -> str:
        """Moves the cursor down and returns the line under it."""
        self._index = min(len(self._entries), self._index + 1)
        return self._current()

    def _current(self) -> str:
        if 0 <= self._index < len(self._entries):
            return self._entries[self._index]
        return ""
