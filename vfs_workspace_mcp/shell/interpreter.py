"""A small shell over the virtual file system."""

import logging
from collections.abc import Callable

from vfs_workspace_mcp.vfs import ROOT, DirectoryNode, VfsStore, resolve_path

from .history import CommandHistory

logger = logging.getLogger(__name__)

SHELL_NAME = "vsh"

SHELL_COMMANDS = ["ls", "cd", "pwd", "cat", "touch", "mkdir", "rm", "mv", "cp", "echo", "clear", "help"]

DIRECTORY_COLOR = "\x1b[1;34m"
RESET_COLOR = "\x1b[0m"


class CommandInterpreter:
    """
    Translates command lines into VFS operations.

    The interpreter keeps its own working directory; the tree has no notion
    of one. Arguments are split on runs of whitespace, there is no quoting,
    redirection or globbing. Every command produces output text and never
    raises for user errors.
    """

    def __init__(
        self,
        store: VfsStore,
        color: bool = False,
        on_clear: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._color = color
        self._on_clear = on_clear
        self.cwd = ROOT
        self.history = CommandHistory()

    def execute(self, line: str) -> str:
        """Runs a single command line and returns its output."""
        args = line.split()
        if not args:
            return ""
        self.history.push(line)
        command, args = args[0], args[1:]
        logger.debug(f"Shell command '{command}' with args {args} in {self.cwd}")

        match command:
            case "ls":
                return self._ls_handler(args)
            case "cd":
                return self._cd_handler(args)
            case "pwd":
                return self.cwd
            case "cat":
                return self._cat_handler(args)
            case "touch":
                return self._touch_handler(args)
            case "mkdir":
                return self._mkdir_handler(args)
            case "rm":
                return self._rm_handler(args)
            case "mv":
                return self._mv_handler(args)
            case "cp":
                return self._cp_handler(args)
            case "echo":
                return " ".join(args)
            case "clear":
                if self._on_clear is not None:
                    self._on_clear()
                return ""
            case "help":
                return "\n".join(
                    [
                        f"{SHELL_NAME}: A basic shell for the workspace file system",
                        f"Commands: {', '.join(SHELL_COMMANDS)}",
                    ]
                )
            case _:
                return f"{SHELL_NAME}: command not found: {command}"

    def run_for_agent(self, line: str) -> str:
        """Runs a command on behalf of the agent; empty output becomes a confirmation."""
        logger.info(f"Agent shell command: {line}")
        return self.execute(line) or "Command executed successfully."

    def _resolve(self, target: str) -> str:
        return resolve_path(self.cwd, target)

    def _ls_handler(self, args: list[str]) -> str:
        target = args[0] if args else "."
        node = self._store.find_node(self._resolve(target))
        if not isinstance(node, DirectoryNode):
            return f"ls: cannot access '{target}': No such file or directory"

        entries = []
        for name in sorted(node.children):
            if isinstance(node.children[name], DirectoryNode):
                entries.append(f"{DIRECTORY_COLOR}{name}/{RESET_COLOR}" if self._color else f"{name}/")
            else:
                entries.append(name)
        return "\n".join(entries)

    def _cd_handler(self, args: list[str]) -> str:
        if not args:
            return ""
        new_path = self._resolve(args[0])
        if self._store.is_directory(new_path):
            self.cwd = new_path
            return ""
        return f"cd: no such file or directory: {args[0]}"

    def _cat_handler(self, args: list[str]) -> str:
        if not args:
            return "cat: missing operand"
        path = self._resolve(args[0])
        content = self._store.read(path)
        if content is not None:
            return content
        if self._store.is_directory(path):
            return f"cat: {args[0]}: Is a directory"
        return f"cat: {args[0]}: No such file or directory"

    def _touch_handler(self, args: list[str]) -> str:
        if not args:
            return "touch: missing file operand"
        path = self._resolve(args[0])
        if self._store.exists(path):
            return ""
        if self._store.create_file(path):
            return ""
        return f"touch: cannot create file '{args[0]}'"

    def _mkdir_handler(self, args: list[str]) -> str:
        if not args:
            return "mkdir: missing operand"
        path = self._resolve(args[0])
        if self._store.exists(path):
            return f"mkdir: cannot create directory '{args[0]}': File exists"
        if self._store.create_directory(path):
            return ""
        return f"mkdir: failed to create directory '{args[0]}'"

    def _rm_handler(self, args: list[str]) -> str:
        if not args:
            return "rm: missing operand"
        result = self._store.delete(self._resolve(args[0]))
        return "" if result else result.error or "Failed to remove"

    def _mv_handler(self, args: list[str]) -> str:
        if len(args) < 2:
            return "mv: missing destination file operand"
        result = self._store.move(self._resolve(args[0]), self._resolve(args[1]))
        return "" if result else result.error or "Failed to move"

    def _cp_handler(self, args: list[str]) -> str:
        if len(args) < 2:
            return "cp: missing destination file operand"
        result = self._store.copy(self._resolve(args[0]), self._resolve(args[1]))
        return "" if result else result.error or "Failed to copy"
