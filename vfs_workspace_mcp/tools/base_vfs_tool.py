# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Base class for tools operating on the workspace file system."""

import logging
from abc import ABC, abstractmethod
from typing_extensions import override

from vfs_workspace_mcp.tools.base import Tool, ToolCallArguments, ToolError, ToolExecResult
from vfs_workspace_mcp.vfs import ROOT, VfsStore, resolve_path

logger = logging.getLogger(__name__)


class BaseVfsTool(Tool, ABC):
    """Base class for VFS tools with common argument and path handling.

    Agent paths are always resolved against the root, so ``.``,
    ``src/app.js`` and ``/src/app.js`` are all accepted.
    """

    def __init__(self, store: VfsStore, model_provider: str | None = None) -> None:
        super().__init__(model_provider)
        self._store = store

    def _resolve(self, path_str: str) -> str:
        resolved = resolve_path(ROOT, path_str)
        logger.debug(f"Resolved path: {path_str} -> {resolved}")
        return resolved

    def _string_argument(self, arguments: ToolCallArguments, name: str, required: bool = True) -> str:
        """
        Extract a string argument.

        Args:
            arguments: The tool call arguments
            name: The argument name
            required: Whether a missing argument is an error

        Returns:
            The argument value, or an empty string for a missing optional argument

        Raises:
            ToolError: If a required argument is missing or the value is not a string
        """
        value = arguments.get(name)
        if value is None:
            if required:
                raise ToolError(f"Missing required argument '{name}' for tool '{self.get_name()}'")
            return ""
        if not isinstance(value, str):
            raise ToolError(f"Argument '{name}' for tool '{self.get_name()}' must be a string")
        return value

    @abstractmethod
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        """
        Execute the specific operation for this tool.

        Args:
            arguments: The tool call arguments

        Returns:
            The result of the operation
        """
        pass

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        try:
            return await self._execute_operation(arguments)
        except ToolError as e:
            logger.error(f"Tool error in {self.get_name()}: {e}")
            return ToolExecResult(error=str(e), error_code=-1)
