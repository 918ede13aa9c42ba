"""Repository interfaces for Git operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from diff_agents.git.domain.value_objects import DiffSummary


class GitRepository(ABC):
    """Interface for Git repository operations."""

    @abstractmethod
    def get_diff_summary(self, repo_path: Path) -> DiffSummary:
        """
        Summarize the uncommitted changes of a working tree.

        Args:
            repo_path: Path to the git working tree

        Returns:
            DiffSummary with per-file insertion and deletion counts
        """
        ...

    @abstractmethod
    def get_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the unified diff of the uncommitted changes to a single file.

        Args:
            repo_path: Path to the git working tree
            file_path: Path to the file relative to repository root

        Returns:
            Unified diff text for the file
        """
        ...
