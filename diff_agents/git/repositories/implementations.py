"""Concrete implementation of Git repository operations."""

import logging
import subprocess
from pathlib import Path

from diff_agents.git.domain.value_objects import DiffFileStat, DiffSummary
from diff_agents.git.repositories.interfaces import GitRepository

logger = logging.getLogger(__name__)


class GitRepositoryImpl(GitRepository):
    """Concrete implementation of Git repository operations using git commands."""

    def get_diff_summary(self, repo_path: Path) -> DiffSummary:
        """
        Summarize the uncommitted changes of a working tree.

        Args:
            repo_path: Path to the git working tree

        Returns:
            DiffSummary with files in the order git lists them

        Raises:
            RuntimeError: If git fails or the path cannot be used
        """
        output = self._run_git(repo_path, ["diff", "--numstat", "-z"], "get diff summary")

        # -z leaves paths unquoted; a rename has an empty path followed by old and new paths
        records = output.split("\0")
        files: list[DiffFileStat] = []
        index = 0
        while index < len(records):
            record = records[index]
            index += 1
            if not record:
                continue
            parts = record.split("\t", 2)
            if len(parts) != 3:
                logger.debug("Skipping unexpected numstat record: %r", record)
                continue
            added, removed, file_path = parts
            if not file_path:
                file_path = records[index + 1] if index + 1 < len(records) else ""
                index += 2
            files.append(self._parse_numstat_entry(added, removed, file_path))

        return DiffSummary(
            insertions=sum(file_stat.insertions for file_stat in files),
            deletions=sum(file_stat.deletions for file_stat in files),
            files=tuple(files),
        )

    def get_file_diff(self, repo_path: Path, file_path: str) -> str:
        """
        Get the unified diff of the uncommitted changes to a single file.

        Args:
            repo_path: Path to the git working tree
            file_path: Path to the file relative to repository root

        Returns:
            Unified diff text for the file

        Raises:
            RuntimeError: If git fails or the path cannot be used
        """
        return self._run_git(
            repo_path, ["diff", "--", file_path], f"get file diff for {file_path}"
        )

    @staticmethod
    def _run_git(repo_path: Path, args: list[str], action: str) -> str:
        """Run a git command in repo_path and return its stdout."""
        logger.debug("Running git %s in %s", " ".join(args), repo_path)
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else str(e)
            raise RuntimeError(f"Failed to {action} in {repo_path}: {error_msg}") from e
        except OSError as e:
            raise RuntimeError(f"Failed to {action} in {repo_path}: {e}") from e

    @staticmethod
    def _parse_numstat_entry(added: str, removed: str, file_path: str) -> DiffFileStat:
        """Parse one `git diff --numstat` entry; binary files report '-' counts."""
        if added == "-" and removed == "-":
            return DiffFileStat(file=file_path, insertions=0, deletions=0, binary=True)
        return DiffFileStat(
            file=file_path,
            insertions=int(added),
            deletions=int(removed),
            binary=False,
        )
