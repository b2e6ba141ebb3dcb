import logging

from vfs_workspace_mcp.models.workspace import Workspace
from vfs_workspace_mcp.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Manages workspaces for all user sessions."""

    def __init__(self, config: ServiceConfig | None = None) -> None:
        self._config = config or ServiceConfig()
        # Simple dict as an in-process session storage.
        # Workspaces live for the lifetime of the process only.
        self._storage: dict[str, Workspace] = {}

    def get_workspace(self, session_id: str = "default") -> Workspace:
        """Returns or creates the workspace for a given session."""
        if session_id not in self._storage:
            logger.info(f"Creating workspace for session '{session_id}'")
            self._storage[session_id] = Workspace(
                seed_readme=self._config.VFS_SEED_README,
                shell_color=self._config.SHELL_COLOR,
                max_search_results=self._config.SEARCH_MAX_RESULTS,
            )
        return self._storage[session_id]

    def drop_workspace(self, session_id: str) -> bool:
        return self._storage.pop(session_id, None) is not None
