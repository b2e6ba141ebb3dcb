from pydantic import BaseModel, ConfigDict

from vfs_workspace_mcp.shell import CommandInterpreter
from vfs_workspace_mcp.tools.executor import ToolExecutor, create_tool_executor
from vfs_workspace_mcp.tools.utils.constants import MAX_SEARCH_RESULTS
from vfs_workspace_mcp.vfs import VfsStore
from vfs_workspace_mcp.vfs.defaults import README_NAME, initial_tree
from vfs_workspace_mcp.vfs.paths import ROOT, join_path


class Workspace(BaseModel):
    """One file system tree together with the shell and agent tools that operate on it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    seed_readme: bool = True
    shell_color: bool = False
    max_search_results: int = MAX_SEARCH_RESULTS
    store: VfsStore | None = None
    shell: CommandInterpreter | None = None
    tools: ToolExecutor | None = None

    def model_post_init(self, __context) -> None:
        if self.store is None:
            if self.seed_readme:
                self.store = VfsStore(initial_tree(), active_file=join_path(ROOT, README_NAME))
            else:
                self.store = VfsStore()
        if self.shell is None:
            self.shell = CommandInterpreter(self.store, color=self.shell_color)
        if self.tools is None:
            self.tools = create_tool_executor(
                self.store, self.shell.run_for_agent, max_search_results=self.max_search_results
            )
