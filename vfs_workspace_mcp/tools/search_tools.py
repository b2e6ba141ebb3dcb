"""Agent tools for inspecting the workspace without changing it."""

import json
import logging
from typing_extensions import override

from vfs_workspace_mcp.tools.base import ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from vfs_workspace_mcp.tools.base_vfs_tool import BaseVfsTool
from vfs_workspace_mcp.tools.utils.constants import (
    GO_MARKERS,
    MAX_SEARCH_RESULTS,
    PYTHON_MARKERS,
    RUST_MARKERS,
    WEB_SUFFIXES,
)
from vfs_workspace_mcp.tools.utils.formatting_utils import SearchMatch, format_search_results, format_size
from vfs_workspace_mcp.vfs import DirectoryNode, FileNode, VfsStore
from vfs_workspace_mcp.vfs.paths import base_name, join_path

logger = logging.getLogger(__name__)


def _parse_extensions(raw: str) -> set[str]:
    return {ext.strip().lower().lstrip(".") for ext in raw.split(",") if ext.strip()}


def _extension(file_path: str) -> str:
    name = base_name(file_path)
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


class SearchInFilesTool(BaseVfsTool):
    """
    Plain substring search over every file below a directory.

    Files are visited in sorted path order and each matching line is
    reported with its 1-based line number.
    """

    def __init__(
        self, store: VfsStore, max_results: int = MAX_SEARCH_RESULTS, model_provider: str | None = None
    ) -> None:
        super().__init__(store, model_provider)
        self._max_results = max_results

    @override
    def get_name(self) -> str:
        return "search_in_files"

    @override
    def get_description(self) -> str:
        return """Search for a text pattern across the files of the project.
* The match is a plain, case-sensitive substring match.
* Results are reported as `path:line: text`."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="search_pattern",
                type="string",
                description="The text pattern to search for.",
            ),
            ToolParameter(
                name="directory",
                type="string",
                description="Directory to search in (use '.' for root).",
            ),
            ToolParameter(
                name="file_extensions",
                type="string",
                description="Comma-separated file extensions to search (e.g., 'js,ts,jsx,tsx'). Leave empty for all files.",
                required=False,
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        pattern = self._string_argument(arguments, "search_pattern")
        directory = self._string_argument(arguments, "directory")
        extensions = _parse_extensions(self._string_argument(arguments, "file_extensions", required=False))

        path = self._resolve(directory)
        if not self._store.is_directory(path):
            raise ToolError(f"Directory not found at '{directory}'")

        matches: list[SearchMatch] = []
        for file_path, content in self._store.iter_files(path):
            if extensions and _extension(file_path) not in extensions:
                continue
            if pattern not in content:
                continue
            for index, line in enumerate(content.split("\n")):
                if pattern in line:
                    matches.append(SearchMatch(file_path, index + 1, line))

        logger.debug(f"Search for {pattern!r} in {path} found {len(matches)} matches")
        return ToolExecResult(output=format_search_results(matches, pattern, self._max_results))


class GetFileInfoTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "get_file_info"

    @override
    def get_description(self) -> str:
        return "Get information about a file or directory: its type, size and line count, or number of entries."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="path",
                type="string",
                description="Path to the file or directory to inspect.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        path = self._string_argument(arguments, "path")
        node = self._store.find_node(self._resolve(path))
        match node:
            case FileNode(content=content):
                size = len(content.encode("utf-8"))
                lines = len(content.split("\n")) if content else 0
                return ToolExecResult(
                    output=f"File: {path}\nType: file\nSize: {size} bytes ({format_size(size)})\nLines: {lines}"
                )
            case DirectoryNode(children=children):
                return ToolExecResult(output=f"Directory: {path}\nType: directory\nContains: {len(children)} items")
            case _:
                raise ToolError(f"Path not found: {path}")


class DetectProjectTypeTool(BaseVfsTool):
    """Guesses the kind of project from the marker files of a directory."""

    @override
    def get_name(self) -> str:
        return "detect_project_type"

    @override
    def get_description(self) -> str:
        return "Analyze the project structure to detect the project type and suggest an appropriate development setup."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="root_directory",
                type="string",
                description="The root directory to analyze (usually '.').",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        root_directory = self._string_argument(arguments, "root_directory")
        root = self._resolve(root_directory)
        files = self._store.list_directory(root)
        if files is None:
            raise ToolError(f"Directory not found at '{root_directory}'")

        project_type, suggestions = self._detect(root, files)
        return ToolExecResult(
            output=(
                f"Project Type: {project_type}\n\n"
                f"Files found: {', '.join(files)}\n\n"
                f"Suggestions:\n" + "\n".join(suggestions)
            )
        )

    def _detect(self, root: str, files: list[str]) -> tuple[str, list[str]]:
        names = set(files)
        if "package.json" in names:
            return self._detect_node(self._store.read(join_path(root, "package.json")))
        if names & PYTHON_MARKERS or any(name.endswith(".py") for name in files):
            return "Python", ["This is a Python project. You can use pip for package management."]
        if "index.html" in names and any(name.endswith(WEB_SUFFIXES) for name in files):
            return "HTML/CSS/JavaScript", ["This is a web project with HTML/CSS/JavaScript."]
        if names & RUST_MARKERS:
            return "Rust", ["This is a Rust project."]
        if names & GO_MARKERS:
            return "Go", ["This is a Go project."]
        return "unknown", []

    def _detect_node(self, package_content: str | None) -> tuple[str, list[str]]:
        if package_content is None:
            return "unknown", ["Found package.json but it is not a file."]
        try:
            package = json.loads(package_content)
        except json.JSONDecodeError:
            return "unknown", ["Found package.json but couldn't parse it."]
        if not isinstance(package, dict):
            return "unknown", ["Found package.json but couldn't parse it."]

        dependencies: set[str] = set()
        for section in ("dependencies", "devDependencies"):
            entries = package.get(section)
            if isinstance(entries, dict):
                dependencies.update(entries)
        if "react" in dependencies:
            return "React", ["This is a React project. You can use npm/yarn commands for package management."]
        if "express" in dependencies:
            return "Node.js/Express", ["This is a Node.js Express project."]
        return "Node.js", ["This is a Node.js project."]
