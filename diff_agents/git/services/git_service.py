"""Git service for collecting diffs and analysing changes."""

import logging
from pathlib import Path

from diff_agents.git.domain.value_objects import (
    CommitAnalysisResult,
    CommitSuggestions,
    DiffFileStat,
    FileDiff,
    NoChangesResult,
)
from diff_agents.git.repositories.interfaces import GitRepository
from diff_agents.git.services.file_filter_service import FileFilterService

logger = logging.getLogger(__name__)

CONFIG_MARKERS: tuple[str, ...] = ("config", ".json", ".yaml", ".yml")
DOC_MARKERS: tuple[str, ...] = ("README", ".md", "doc")


class GitService:
    """Service for Git operations."""

    def __init__(
        self,
        git_repository: GitRepository,
        file_filter_service: FileFilterService | None = None,
    ) -> None:
        """
        Initialize GitService.

        Args:
            git_repository: Repository implementation for Git operations
            file_filter_service: Filter deciding which paths to skip. Defaults to FileFilterService()
        """
        self._git_repository = git_repository
        self._file_filter_service = file_filter_service or FileFilterService()

    def collect_file_diffs(self, repo_path: Path) -> tuple[FileDiff, ...]:
        """
        Collect the unified diff of every changed file in a working tree.

        Args:
            repo_path: Path to the git working tree

        Returns:
            Tuple of file diffs in diff summary order, excluded paths left out
        """
        summary = self._git_repository.get_diff_summary(repo_path)

        diffs: list[FileDiff] = []
        for file_stat in summary.files:
            if self._file_filter_service.is_excluded(file_stat.file):
                logger.debug("Skipping excluded path %s", file_stat.file)
                continue
            diff = self._git_repository.get_file_diff(repo_path, file_stat.file)
            diffs.append(FileDiff(file=file_stat.file, diff=diff))

        return tuple(diffs)

    def analyze_changes(self, repo_path: Path) -> CommitAnalysisResult | NoChangesResult:
        """
        Summarize the changes of a working tree and flag likely commit types.

        Args:
            repo_path: Path to the git working tree

        Returns:
            CommitAnalysisResult, or NoChangesResult when nothing changed
        """
        summary = self._git_repository.get_diff_summary(repo_path)

        if not summary.files:
            return NoChangesResult()

        return CommitAnalysisResult(
            changes=summary,
            suggestions=self.suggest_commit_types(summary.files),
        )

    @staticmethod
    def suggest_commit_types(files: tuple[DiffFileStat, ...]) -> CommitSuggestions:
        """Classify a file list; every flag is evaluated independently."""
        return CommitSuggestions(
            has_new_files=any(f.insertions > 0 and f.deletions == 0 for f in files),
            has_deleted_files=any(f.deletions > 0 and f.insertions == 0 for f in files),
            has_config_changes=any(
                marker in f.file for f in files for marker in CONFIG_MARKERS
            ),
            has_doc_changes=any(marker in f.file for f in files for marker in DOC_MARKERS),
        )
