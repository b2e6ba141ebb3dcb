# Copyright (c) 2025 ByteDance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

from collections.abc import Callable
from typing_extensions import override

from vfs_workspace_mcp.tools.base import Tool, ToolCallArguments, ToolExecResult, ToolParameter

TerminalExecutor = Callable[[str], str]


class TerminalTool(Tool):
    """
    A tool that lets the agent run a command in the workspace shell.

    The shell is injected as a plain "command text to output text" function,
    so the tool does not know which terminal it talks to.
    """

    def __init__(self, executor: TerminalExecutor | None = None, model_provider: str | None = None):
        super().__init__(model_provider)
        self._executor = executor

    @override
    def get_name(self) -> str:
        return "execute_terminal_command"

    @override
    def get_description(self) -> str:
        return """Execute a command in the workspace terminal.
* Supported commands: ls, cd, pwd, cat, touch, mkdir, rm, mv, cp, echo, clear, help.
* There is no quoting, redirection or piping; arguments are separated by whitespace.
* The terminal keeps its own current directory between calls.
"""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="command",
                type="string",
                description="The command to execute (e.g., 'ls src', 'cat README.md').",
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        if self._executor is None:
            return ToolExecResult(error="Terminal is not available.", error_code=-1)

        command = arguments.get("command")
        if not command or not isinstance(command, str):
            return ToolExecResult(
                error=f"Missing required argument 'command' for tool '{self.get_name()}'", error_code=-1
            )

        output = self._executor(command)
        return ToolExecResult(output=f"Command executed. Output:\n{output}")
