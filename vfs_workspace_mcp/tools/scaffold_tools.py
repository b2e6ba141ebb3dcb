"""Agent tool that generates a starter project inside the workspace."""

import logging
from typing_extensions import override

from vfs_workspace_mcp.tools.base import ToolCallArguments, ToolError, ToolExecResult, ToolParameter
from vfs_workspace_mcp.tools.base_vfs_tool import BaseVfsTool
from vfs_workspace_mcp.tools.utils.scaffold_templates import SCAFFOLD_TEMPLATES, SUPPORTED_PROJECT_TYPES
from vfs_workspace_mcp.vfs import tree_from_files

logger = logging.getLogger(__name__)


class CreateProjectScaffoldTool(BaseVfsTool):
    """
    Creates a new project directory filled from a template.

    The whole project is built off-tree first and grafted in one change, so
    a failing call leaves the workspace exactly as it was.
    """

    @override
    def get_name(self) -> str:
        return "create_project_scaffold"

    @override
    def get_description(self) -> str:
        return """Generate a complete project structure for the given project type.
* Supported types: react, python, node (or nodejs), html (or web).
* The project is created in a new directory named after the project; it must not exist yet."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="project_type",
                type="string",
                description="The type of project to create (react, python, node, html).",
            ),
            ToolParameter(
                name="project_name",
                type="string",
                description="The name of the project.",
            ),
            ToolParameter(
                name="target_directory",
                type="string",
                description="Directory where to create the project (use '.' for the root directory).",
            ),
        ]

    @override
    async def _execute_operation(self, arguments: ToolCallArguments) -> ToolExecResult:
        project_type = self._string_argument(arguments, "project_type")
        project_name = self._string_argument(arguments, "project_name")
        target_directory = self._string_argument(arguments, "target_directory")

        template = SCAFFOLD_TEMPLATES.get(project_type.strip().lower())
        if template is None:
            raise ToolError(
                f"Unknown project type '{project_type}'. Supported types: {', '.join(SUPPORTED_PROJECT_TYPES)}"
            )
        if not project_name or "/" in project_name or project_name in (".", ".."):
            raise ToolError(f"Invalid project name '{project_name}'")

        base_path = project_name if target_directory == "." else f"{target_directory}/{project_name}"
        result = self._store.create_tree(self._resolve(base_path), tree_from_files(template.build(project_name)))
        if not result:
            raise ToolError(f"Failed to create project directory {base_path}: {result.error}")

        logger.info(f"Created {template.label} project scaffold at {base_path}")
        return ToolExecResult(output=f"Successfully created {template.label} project '{project_name}' at {base_path}")
