"""
Configuration and dependency management for the VFS workspace MCP server.
"""

import logging
from functools import lru_cache

from vfs_workspace_mcp.models.workspace import Workspace
from vfs_workspace_mcp.utils.config import ServiceConfig
from vfs_workspace_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns a singleton instance of the SessionManager."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(get_base_config())


def get_workspace(session_id: str = "default") -> Workspace:
    """Returns the workspace of a session, creating it on first use."""
    return get_session_manager().get_workspace(session_id)
