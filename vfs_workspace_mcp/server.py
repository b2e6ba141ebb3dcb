"""
MCP server definition for the VFS workspace.
"""

import logging

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from vfs_workspace_mcp.prompts import get_prompt
from vfs_workspace_mcp.utils.config import ServiceConfig
from vfs_workspace_mcp.utils.dependencies import get_base_config, get_workspace


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "vfs-workspace",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


async def _invoke(tool_name: str, arguments: dict[str, str]) -> str:
    """Runs a catalog tool against the default workspace and returns its text result."""
    workspace = get_workspace()
    return await workspace.tools.invoke(tool_name, arguments)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Agent System Prompt for the VFS Workspace")
def get_system_prompt() -> str:
    """Provides the main system prompt for the agent."""
    return get_prompt()


# --- Resources ---
@mcp_app.resource("vfs://tree")
def tree_outline() -> str:
    """An outline of the whole workspace tree."""
    return get_workspace().store.structure()


@mcp_app.resource("vfs://active-file")
def active_file() -> str:
    """The path of the file currently open in the editor, empty if none."""
    return get_workspace().store.active_file or ""


# --- Tool Definitions ---

@mcp_app.tool()
async def list_files(context: Context, directory_path: str) -> str:
    """
    List all files and directories within a directory. Use '.' for the root directory.

    Args:
        directory_path: The path to the directory to inspect.
    """
    return await _invoke("list_files", {"directory_path": directory_path})


@mcp_app.tool()
async def read_file(context: Context, file_path: str) -> str:
    """
    Read the full contents of a single file.

    Args:
        file_path: The path to the file to be read.
    """
    return await _invoke("read_file", {"file_path": file_path})


@mcp_app.tool()
async def write_file(context: Context, file_path: str, content: str) -> str:
    """
    Write content to a file, creating it if it doesn't exist. The parent directory must exist.

    Args:
        file_path: The path of the file to be written to.
        content: The new content of the file.
    """
    return await _invoke("write_file", {"file_path": file_path, "content": content})


@mcp_app.tool()
async def modify_file(context: Context, file_path: str, search_text: str, replacement_text: str) -> str:
    """
    Replace the first exact occurrence of `search_text` in a file.

    Args:
        file_path: The path to the file to modify.
        search_text: The text to find (exact match).
        replacement_text: The text to replace it with.
    """
    return await _invoke(
        "modify_file",
        {"file_path": file_path, "search_text": search_text, "replacement_text": replacement_text},
    )


@mcp_app.tool()
async def create_directory(context: Context, directory_path: str) -> str:
    """
    Create a new, empty directory. The parent directory must exist.

    Args:
        directory_path: The path for the new directory.
    """
    return await _invoke("create_directory", {"directory_path": directory_path})


@mcp_app.tool()
async def delete_file_or_directory(context: Context, path: str) -> str:
    """
    Delete a file or a directory with everything inside it.

    Args:
        path: The path to the file or directory to delete.
    """
    return await _invoke("delete_file_or_directory", {"path": path})


@mcp_app.tool()
async def copy_file_or_directory(context: Context, source_path: str, destination_path: str) -> str:
    """
    Copy a file or directory. Copies into `destination_path` when it is an existing directory.

    Args:
        source_path: The path to the source file or directory.
        destination_path: The path where to copy the file or directory.
    """
    return await _invoke(
        "copy_file_or_directory", {"source_path": source_path, "destination_path": destination_path}
    )


@mcp_app.tool()
async def move_file_or_directory(context: Context, source_path: str, destination_path: str) -> str:
    """
    Move or rename a file or directory. Moves into `destination_path` when it is an existing directory.

    Args:
        source_path: The current path of the file or directory.
        destination_path: The new path for the file or directory.
    """
    return await _invoke(
        "move_file_or_directory", {"source_path": source_path, "destination_path": destination_path}
    )


@mcp_app.tool()
async def search_in_files(
    context: Context,
    search_pattern: str,
    directory: str = ".",
    file_extensions: str | None = None,
) -> str:
    """
    Search for a text pattern across the files of the project.

    Args:
        search_pattern: The text pattern to search for.
        directory: Directory to search in (use '.' for root).
        file_extensions: Comma-separated file extensions to search (e.g., 'js,ts'). Leave empty for all files.
    """
    args = {"search_pattern": search_pattern, "directory": directory, "file_extensions": file_extensions}
    # Filter out None values for optional tool arguments
    return await _invoke("search_in_files", {k: v for k, v in args.items() if v is not None})


@mcp_app.tool()
async def get_file_info(context: Context, path: str) -> str:
    """
    Get the type, size and line count of a file, or the number of entries of a directory.

    Args:
        path: Path to the file or directory to inspect.
    """
    return await _invoke("get_file_info", {"path": path})


@mcp_app.tool()
async def detect_project_type(context: Context, root_directory: str = ".") -> str:
    """
    Detect the project type from its marker files.

    Args:
        root_directory: The root directory to analyze (usually '.').
    """
    return await _invoke("detect_project_type", {"root_directory": root_directory})


@mcp_app.tool()
async def create_project_scaffold(
    context: Context, project_type: str, project_name: str, target_directory: str = "."
) -> str:
    """
    Generate a complete starter project (react, python, node, html) in a new directory.

    Args:
        project_type: The type of project to create (react, python, node, html).
        project_name: The name of the project, also used as its directory name.
        target_directory: Directory where to create the project (use '.' for the root directory).
    """
    return await _invoke(
        "create_project_scaffold",
        {"project_type": project_type, "project_name": project_name, "target_directory": target_directory},
    )


@mcp_app.tool()
async def execute_terminal_command(context: Context, command: str) -> str:
    """
    Execute a command in the workspace terminal (ls, cd, pwd, cat, touch, mkdir, rm, mv, cp, echo).

    Args:
        command: The command to execute (e.g., 'ls src', 'cat README.md').
    """
    return await _invoke("execute_terminal_command", {"command": command})


@mcp_app.tool()
async def terminal(context: Context, command: str) -> str:
    """
    Run a command line in the interactive workspace shell and return its raw output.

    Args:
        command: The command line as typed in the terminal.
    """
    logger.info(f"Executing terminal command: {command}")
    return get_workspace().shell.execute(command)
