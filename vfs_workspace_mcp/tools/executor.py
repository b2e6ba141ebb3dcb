"""Dispatch of agent tool calls onto the workspace tools."""

import logging
from collections.abc import Iterable, Mapping

from vfs_workspace_mcp.tools.base import Tool, ToolCallArguments
from vfs_workspace_mcp.tools.file_tools import (
    CopyTool,
    CreateDirectoryTool,
    DeleteTool,
    ListFilesTool,
    ModifyFileTool,
    MoveTool,
    ReadFileTool,
    WriteFileTool,
)
from vfs_workspace_mcp.tools.scaffold_tools import CreateProjectScaffoldTool
from vfs_workspace_mcp.tools.search_tools import DetectProjectTypeTool, GetFileInfoTool, SearchInFilesTool
from vfs_workspace_mcp.tools.terminal_tool import TerminalExecutor, TerminalTool
from vfs_workspace_mcp.tools.utils.constants import MAX_SEARCH_RESULTS
from vfs_workspace_mcp.vfs import VfsStore

logger = logging.getLogger(__name__)


class ToolExecutor:
    """
    Maps tool names onto tools and renders every outcome as text.

    The agent reads results as free text: failures always start with
    ``Error``, and no exception ever escapes ``invoke``.
    """

    def __init__(self, tools: Iterable[Tool]) -> None:
        self._tools: dict[str, Tool] = {tool.name: tool for tool in tools}

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[dict[str, object]]:
        """Function declarations of the whole catalog, for an LLM client."""
        return [tool.json_definition() for tool in self._tools.values()]

    async def invoke(self, tool_name: str, arguments: Mapping[str, object]) -> str:
        tool = self._tools.get(tool_name)
        if tool is None:
            return f"Error: Unknown tool '{tool_name}'. Available tools: {', '.join(self._tools)}"

        logger.info(f"Executing tool '{tool_name}'")
        args: ToolCallArguments = dict(arguments)  # pyright: ignore[reportAssignmentType]
        try:
            result = await tool.execute(args)
        except Exception as e:
            logger.error(f"Error executing tool '{tool_name}': {e}", exc_info=True)
            return f"Error executing tool '{tool_name}': {e}"

        if result.error:
            return f"Error: {result.error}"
        return result.output or ""

    async def invoke_batch(self, calls: Iterable[tuple[str, Mapping[str, object]]]) -> list[str]:
        """
        Runs several tool calls one after another.

        Calls that the agent issued together are still applied in order, each
        against the tree left by the previous call.
        """
        results = []
        for tool_name, arguments in calls:
            results.append(await self.invoke(tool_name, arguments))
        return results


def create_tool_executor(
    store: VfsStore,
    terminal: TerminalExecutor | None = None,
    max_search_results: int = MAX_SEARCH_RESULTS,
) -> ToolExecutor:
    """Builds the executor holding the full tool catalog for ``store``."""
    return ToolExecutor(
        [
            ListFilesTool(store),
            ReadFileTool(store),
            WriteFileTool(store),
            ModifyFileTool(store),
            CreateDirectoryTool(store),
            DeleteTool(store),
            CopyTool(store),
            MoveTool(store),
            SearchInFilesTool(store, max_results=max_search_results),
            GetFileInfoTool(store),
            TerminalTool(terminal),
            DetectProjectTypeTool(store),
            CreateProjectScaffoldTool(store),
        ]
    )
