"""Unit tests for the tool registry."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest
from langchain_core.tools import StructuredTool

from diff_agents.agents.services.tool_registry import (
    COMMIT_MESSAGE_TOOL,
    FILE_CHANGES_TOOL,
    MARKDOWN_FILE_TOOL,
    ToolRegistry,
    create_tool_registry,
)
from diff_agents.docs.services.markdown_service import MarkdownService
from diff_agents.git.domain.value_objects import FileDiff, NoChangesResult


def _noop_tool(name: str) -> StructuredTool:
    def noop() -> str:
        """Do nothing."""
        return ""

    return StructuredTool.from_function(func=noop, name=name, description="noop")


class TestToolRegistry:
    """Test cases for ToolRegistry."""

    def test_register_and_get(self):
        tool = _noop_tool("a")
        registry = ToolRegistry([tool])

        assert registry.get("a") is tool
        assert "a" in registry
        assert len(registry) == 1

    def test_unknown_tool(self):
        registry = ToolRegistry([_noop_tool("a")])

        with pytest.raises(KeyError, match="Unknown tool: b"):
            registry.get("b")

    def test_duplicate_name(self):
        registry = ToolRegistry([_noop_tool("a")])

        with pytest.raises(ValueError, match="already registered"):
            registry.register(_noop_tool("a"))

    def test_select_keeps_requested_order(self):
        registry = ToolRegistry([_noop_tool("a"), _noop_tool("b"), _noop_tool("c")])

        assert [tool.name for tool in registry.select(["c", "a"])] == ["c", "a"]


class TestDefaultTools:
    """Test cases for the tools built by create_tool_registry."""

    def setup_method(self):
        self.git_service = Mock()
        self.registry = create_tool_registry(self.git_service, MarkdownService())

    def test_registered_names(self):
        assert self.registry.names() == (
            FILE_CHANGES_TOOL,
            COMMIT_MESSAGE_TOOL,
            MARKDOWN_FILE_TOOL,
        )

    def test_file_changes_tool(self):
        self.git_service.collect_file_diffs.return_value = (FileDiff("a.py", "+x"),)

        result = self.registry.get(FILE_CHANGES_TOOL).invoke({"root_dir": "../project"})

        assert json.loads(result) == [{"file": "a.py", "diff": "+x"}]
        self.git_service.collect_file_diffs.assert_called_once_with(Path("../project"))

    def test_commit_message_tool(self):
        self.git_service.analyze_changes.return_value = NoChangesResult()

        result = self.registry.get(COMMIT_MESSAGE_TOOL).invoke({"root_dir": "."})

        assert json.loads(result) == {
            "message": "No changes detected to generate commit message for"
        }

    def test_markdown_tool_writes_file(self, tmp_path):
        file_path = tmp_path / "DOCS.md"

        result = self.registry.get(MARKDOWN_FILE_TOOL).invoke(
            {"file_path": str(file_path), "content": "Run npm install", "title": "Setup"}
        )
        result = json.loads(result)

        assert result["success"] is True
        assert result["content_length"] == len("# Setup\n\nRun npm install")
        assert file_path.read_text(encoding="utf-8") == "# Setup\n\nRun npm install"

    def test_markdown_tool_title_is_optional(self, tmp_path):
        file_path = tmp_path / "DOCS.md"

        result = self.registry.get(MARKDOWN_FILE_TOOL).invoke(
            {"file_path": str(file_path), "content": "Body"}
        )
        result = json.loads(result)

        assert result["success"] is True
        assert file_path.read_text(encoding="utf-8") == "Body"

    def test_empty_collection_is_json_text(self):
        self.git_service.collect_file_diffs.return_value = ()

        result = self.registry.get(FILE_CHANGES_TOOL).invoke({"root_dir": "."})

        assert result == "[]"

    def test_non_ascii_is_kept(self):
        self.git_service.collect_file_diffs.return_value = (FileDiff("caf\u00e9.md", "+cr\u00eape"),)

        result = self.registry.get(FILE_CHANGES_TOOL).invoke({"root_dir": "."})

        assert "caf\u00e9.md" in result

    @pytest.mark.parametrize(
        "tool_name, args",
        [
            (FILE_CHANGES_TOOL, {"root_dir": ""}),
            (COMMIT_MESSAGE_TOOL, {}),
            (MARKDOWN_FILE_TOOL, {"file_path": "x.md", "content": ""}),
        ],
    )
    def test_validation_errors_are_returned(self, tool_name, args):
        result = self.registry.get(tool_name).invoke(args)

        assert isinstance(result, str)
        assert "validation error" in result.lower()
        self.git_service.collect_file_diffs.assert_not_called()
        self.git_service.analyze_changes.assert_not_called()
