"""Value objects for Agents domain."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


class AgentTask(str, Enum):
    """Tasks the runner knows how to perform, in their default order."""

    REVIEW = "review"
    COMMIT = "commit"
    DOCS = "docs"


@dataclass(frozen=True)
class TaskRequest:
    """A task together with the prompt rendered for it."""

    task: AgentTask
    prompt: str


class FileChangesInput(BaseModel):
    """Input of the diff collection tool."""

    root_dir: str = Field(min_length=1, description="The root directory")


class CommitMessageInput(BaseModel):
    """Input of the commit analysis tool."""

    root_dir: str = Field(
        min_length=1, description="The root directory to analyze for commit message"
    )


class MarkdownFileInput(BaseModel):
    """Input of the markdown writing tool."""

    file_path: str = Field(
        min_length=1, description="The path where the markdown file should be created"
    )
    content: str = Field(
        min_length=1, description="The content to write to the markdown file"
    )
    title: str | None = Field(
        default=None, description="Optional title for the markdown file"
    )
