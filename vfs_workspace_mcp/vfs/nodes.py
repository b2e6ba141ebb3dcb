"""Node types of the virtual file system tree."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FileNode(BaseModel):
    """A leaf holding text content."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    content: str = ""


class DirectoryNode(BaseModel):
    """
    An internal node mapping single path segments to child nodes.

    Once a directory is reachable from a published tree its ``children``
    mapping is never modified; mutations build a new directory instead.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["directory"] = "directory"
    children: dict[str, "Node"] = Field(default_factory=dict)


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="type")]

DirectoryNode.model_rebuild()
