"""Agent tools for reading and changing files and directories."""

from typing_extensions import override

from vfs_workspace_mcp.tools.base import ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from vfs_workspace_mcp.tools.base_vfs_tool import BaseVfsTool


class ListFilesTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "list_files"

    @override
    def get_description(self) -> str:
        return "List all files and directories within a specified directory. Use '.' for the root directory."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="directory_path",
                type="string",
                description="The path to the directory to inspect.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        directory_path = self._string_argument(arguments, "directory_path")
        names = self._store.list_directory(self._resolve(directory_path))
        if names is None:
            raise ToolError(f"Directory not found at '{directory_path}'")
        return ToolExecResult(output="\n".join(names))


class ReadFileTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "read_file"

    @override
    def get_description(self) -> str:
        return "Read the full contents of a single file. Returns an error message if the file doesn't exist."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="file_path",
                type="string",
                description="The path to the file to be read.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        file_path = self._string_argument(arguments, "file_path")
        content = self._store.read(self._resolve(file_path))
        if content is None:
            raise ToolError(f"File not found at '{file_path}'")
        return ToolExecResult(output=content)


class WriteFileTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "write_file"

    @override
    def get_description(self) -> str:
        return """Write content to a file. Creates the file if it doesn't exist, overwrites it if it does.
* The parent directory must already exist; use `create_directory` first if needed.
* The written file is opened in the editor."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="file_path",
                type="string",
                description="The path of the file to be written to.",
            ),
            ToolParameter(
                name="content",
                type="string",
                description="The new content to write to the file.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        file_path = self._string_argument(arguments, "file_path")
        content = self._string_argument(arguments, "content")
        path = self._resolve(file_path)

        result = self._store.write(path, content)
        if not result:
            raise ToolError(f"Failed to write to {file_path}: {result.error}")
        self._store.select(path)
        return ToolExecResult(output=f"Successfully wrote to {file_path}")


class ModifyFileTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "modify_file"

    @override
    def get_description(self) -> str:
        return """Modify a section of a file without overwriting the entire content.
* `search_text` must match the file content exactly. Only the first occurrence is replaced.
* The modified file is opened in the editor."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="file_path",
                type="string",
                description="The path to the file to modify.",
            ),
            ToolParameter(
                name="search_text",
                type="string",
                description="The text to find and replace (exact match).",
            ),
            ToolParameter(
                name="replacement_text",
                type="string",
                description="The text to replace it with.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        file_path = self._string_argument(arguments, "file_path")
        search_text = self._string_argument(arguments, "search_text")
        replacement_text = self._string_argument(arguments, "replacement_text")
        path = self._resolve(file_path)

        current = self._store.read(path)
        if current is None:
            raise ToolError(f"File not found at '{file_path}'")
        if search_text not in current:
            raise ToolError(f"Search text not found in {file_path}")

        result = self._store.write(path, current.replace(search_text, replacement_text, 1))
        if not result:
            raise ToolError(f"Failed to modify {file_path}: {result.error}")
        self._store.select(path)
        return ToolExecResult(output=f"Successfully modified {file_path}")


class CreateDirectoryTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "create_directory"

    @override
    def get_description(self) -> str:
        return "Create a new, empty directory at the specified path. The parent directory must already exist."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="directory_path",
                type="string",
                description="The path for the new directory.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        directory_path = self._string_argument(arguments, "directory_path")
        result = self._store.create_directory(self._resolve(directory_path))
        if not result:
            raise ToolError(f"Failed to create directory {directory_path}: {result.error}")
        return ToolExecResult(output=f"Successfully created directory {directory_path}")


class DeleteTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "delete_file_or_directory"

    @override
    def get_description(self) -> str:
        return "Delete a file or directory, including everything inside it. This cannot be undone."

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="path",
                type="string",
                description="The path to the file or directory to delete.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        path = self._string_argument(arguments, "path")
        result = self._store.delete(self._resolve(path))
        if not result:
            raise ToolError(result.error or f"Failed to delete {path}")
        return ToolExecResult(output=f"Successfully deleted {path}")


class CopyTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "copy_file_or_directory"

    @override
    def get_description(self) -> str:
        return """Copy a file or directory to another location.
* If `destination_path` is an existing directory, the source is copied into it under its own name.
* Existing files are never overwritten."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="source_path",
                type="string",
                description="The path to the source file or directory.",
            ),
            ToolParameter(
                name="destination_path",
                type="string",
                description="The path where to copy the file or directory.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        source_path = self._string_argument(arguments, "source_path")
        destination_path = self._string_argument(arguments, "destination_path")
        result = self._store.copy(self._resolve(source_path), self._resolve(destination_path))
        if not result:
            raise ToolError(result.error or f"Failed to copy {source_path}")
        return ToolExecResult(output=f"Successfully copied {source_path} to {destination_path}")


class MoveTool(BaseVfsTool):
    @override
    def get_name(self) -> str:
        return "move_file_or_directory"

    @override
    def get_description(self) -> str:
        return """Move or rename a file or directory.
* If `destination_path` is an existing directory, the source is moved into it under its own name.
* Existing files are never overwritten. A file open in the editor stays open at its new location."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="source_path",
                type="string",
                description="The current path of the file or directory.",
            ),
            ToolParameter(
                name="destination_path",
                type="string",
                description="The new path for the file or directory.",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        source_path = self._string_argument(arguments, "source_path")
        destination_path = self._string_argument(arguments, "destination_path")
        result = self._store.move(self._resolve(source_path), self._resolve(destination_path))
        if not result:
            raise ToolError(result.error or f"Failed to move {source_path}")
        return ToolExecResult(output=f"Successfully moved {source_path} to {destination_path}")
