"""Concrete agents, one per task."""

from diff_agents.agents.repositories.base_langchain_agent import BaseLangChainAgent
from diff_agents.agents.services.tool_registry import (
    COMMIT_MESSAGE_TOOL,
    FILE_CHANGES_TOOL,
    MARKDOWN_FILE_TOOL,
)


class CodeReviewAgent(BaseLangChainAgent):
    """Reviews the uncommitted changes of a repository file by file."""

    name = "code review"
    tool_names = (FILE_CHANGES_TOOL,)


class CommitMessageAgent(BaseLangChainAgent):
    """Proposes a conventional commit message for the uncommitted changes."""

    name = "commit message"
    tool_names = (COMMIT_MESSAGE_TOOL,)


class DocumentationAgent(BaseLangChainAgent):
    """Writes markdown documentation to a file."""

    name = "documentation"
    tool_names = (MARKDOWN_FILE_TOOL,)
