"""Shared test fixtures."""

import shutil
import subprocess
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest
from langchain_core.messages import AIMessageChunk, BaseMessage

from diff_agents.git.domain.value_objects import DiffFileStat, DiffSummary
from diff_agents.git.repositories.interfaces import GitRepository


class FakeGitRepository(GitRepository):
    """In-memory git repository that records every query."""

    def __init__(self, files: Iterable[DiffFileStat] = (), diffs: dict[str, str] | None = None):
        files = tuple(files)
        self.summary = DiffSummary(
            insertions=sum(f.insertions for f in files),
            deletions=sum(f.deletions for f in files),
            files=files,
        )
        self.diffs = diffs or {}
        self.summary_calls: list[Path] = []
        self.file_diff_calls: list[str] = []

    def get_diff_summary(self, repo_path: Path) -> DiffSummary:
        self.summary_calls.append(repo_path)
        return self.summary

    def get_file_diff(self, repo_path: Path, file_path: str) -> str:
        self.file_diff_calls.append(file_path)
        return self.diffs.get(file_path, f"diff --git a/{file_path} b/{file_path}\n")


class ScriptedChatModel:
    """Chat model stand-in that streams pre-recorded chunks, one list per step."""

    def __init__(self, steps: list[list[AIMessageChunk]], repeat_last: bool = False):
        self._steps = list(steps)
        self._repeat_last = repeat_last
        self.calls: list[list[BaseMessage]] = []
        self.bound_tool_names: list[str] = []

    def bind_tools(self, tools):
        self.bound_tool_names = [tool.name for tool in tools]
        return self

    def stream(self, messages) -> Iterator[AIMessageChunk]:
        self.calls.append(list(messages))
        if len(self._steps) > 1 or (self._steps and not self._repeat_last):
            chunks = self._steps.pop(0)
        elif self._steps:
            chunks = self._steps[0]
        else:
            chunks = [AIMessageChunk(content="")]
        yield from chunks


@pytest.fixture
def fake_git_repository() -> Callable[..., FakeGitRepository]:
    return FakeGitRepository


@pytest.fixture
def scripted_model() -> Callable[..., ScriptedChatModel]:
    return ScriptedChatModel


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", *args],
        cwd=repo,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A committed git repository with README.md, config.json, bun.lock and logo.png."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "config", "user.email", "dev@example.com")
    _git(repo, "config", "user.name", "Dev")
    (repo / "README.md").write_text("# Project\n", encoding="utf-8")
    (repo / "config.json").write_text('{"debug": false}\n', encoding="utf-8")
    (repo / "bun.lock").write_text("lockfile v1\n", encoding="utf-8")
    (repo / "logo.png").write_bytes(b"\x89PNG\x00\x01\x02")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "initial commit")
    return repo
