"""
Entry point of the VFS workspace MCP server: loads the environment,
configures logging and runs the server on the configured transport.
"""

import logging

from dotenv import load_dotenv

from vfs_workspace_mcp.utils.config import ServiceConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(config: ServiceConfig) -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_server() -> None:
    # The .env file must be loaded before the cached config is first built.
    load_dotenv()

    from vfs_workspace_mcp.utils.dependencies import get_base_config

    config = get_base_config()
    configure_logging(config)

    # The server module builds the app at import time from the cached config.
    from vfs_workspace_mcp.server import mcp_app

    logger = logging.getLogger(__name__)
    logger.info("--- VFS Workspace MCP Server ---")
    logger.info("Starting server with transport: %s", config.MCP_TRANSPORT)
    if config.MCP_TRANSPORT != "stdio":
        logger.info("Server will listen on: %s:%s", config.MCP_HOST, config.MCP_PORT)

    mcp_app.run(transport=config.MCP_TRANSPORT)


if __name__ == "__main__":
    run_server()
