"""Registry of the LangChain tools agents may call."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from langchain_core.tools import BaseTool, StructuredTool

from diff_agents.agents.domain.value_objects import (
    CommitMessageInput,
    FileChangesInput,
    MarkdownFileInput,
)
from diff_agents.docs.domain.value_objects import MarkdownWriteRequest
from diff_agents.docs.services.markdown_service import MarkdownService
from diff_agents.git.services.git_service import GitService

FILE_CHANGES_TOOL = "get_file_changes_in_directory"
COMMIT_MESSAGE_TOOL = "generate_commit_message"
MARKDOWN_FILE_TOOL = "generate_markdown_file"


class ToolRegistry:
    """Maps tool names to tool implementations."""

    def __init__(self, tools: Iterable[BaseTool] = ()) -> None:
        self._tools: dict[str, BaseTool] = {}
        for tool in tools:
            self.register(tool)

    def register(self, tool: BaseTool) -> None:
        """
        Register a tool under its name.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name}")
        self._tools[tool.name] = tool

    def get(self, name: str) -> BaseTool:
        """
        Look up a tool by name.

        Raises:
            KeyError: If no tool has that name
        """
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(
                f"Unknown tool: {name}. Registered tools: {', '.join(self.names())}"
            ) from None

    def select(self, names: Iterable[str]) -> list[BaseTool]:
        """Return the named tools in the order requested."""
        return [self.get(name) for name in names]

    def names(self) -> tuple[str, ...]:
        return tuple(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def _to_json(payload: Any) -> str:
    """Serialize a tool result as JSON text."""
    return json.dumps(payload, ensure_ascii=False)


def create_tool_registry(
    git_service: GitService, markdown_service: MarkdownService
) -> ToolRegistry:
    """
    Build the registry of the three agent tools.

    Args:
        git_service: Service backing the diff and commit analysis tools
        markdown_service: Service backing the markdown tool

    Returns:
        ToolRegistry holding every tool
    """

    def get_file_changes_in_directory(root_dir: str) -> str:
        """Get the diff of every changed file under root_dir."""
        file_diffs = git_service.collect_file_diffs(Path(root_dir))
        return _to_json([file_diff.to_dict() for file_diff in file_diffs])

    def generate_commit_message(root_dir: str) -> str:
        """Summarize the changes under root_dir for a commit message."""
        return _to_json(git_service.analyze_changes(Path(root_dir)).to_dict())

    def generate_markdown_file(
        file_path: str, content: str, title: str | None = None
    ) -> str:
        """Write content to a markdown file."""
        request = MarkdownWriteRequest(file_path=Path(file_path), content=content, title=title)
        return _to_json(markdown_service.write(request).to_dict())

    return ToolRegistry(
        [
            StructuredTool.from_function(
                func=get_file_changes_in_directory,
                name=FILE_CHANGES_TOOL,
                description="Gets the code changes made in given directory",
                args_schema=FileChangesInput,
                handle_validation_error=True,
            ),
            StructuredTool.from_function(
                func=generate_commit_message,
                name=COMMIT_MESSAGE_TOOL,
                description="Analyzes git changes and generates conventional "
                "commit message suggestions",
                args_schema=CommitMessageInput,
                handle_validation_error=True,
            ),
            StructuredTool.from_function(
                func=generate_markdown_file,
                name=MARKDOWN_FILE_TOOL,
                description="Creates a markdown file with specified content at the given path",
                args_schema=MarkdownFileInput,
                handle_validation_error=True,
            ),
        ]
    )
