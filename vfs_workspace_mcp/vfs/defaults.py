"""Seed content for new workspaces."""

from .nodes import DirectoryNode, FileNode

README_NAME = "README.md"

README_CONTENT = (
    "# Welcome to your workspace!\n\n"
    "This is a blank workspace.\n\n"
    "Start by telling the agent what you want to build."
)


def initial_tree() -> DirectoryNode:
    return DirectoryNode(children={README_NAME: FileNode(content=README_CONTENT)})
