"""Value objects for Git domain."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DiffFileStat:
    """Line statistics for one file in a diff summary."""

    file: str
    insertions: int
    deletions: int
    binary: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "insertions": self.insertions,
            "deletions": self.deletions,
            "binary": self.binary,
        }


@dataclass(frozen=True)
class DiffSummary:
    """Aggregate statistics of a working tree diff."""

    insertions: int
    deletions: int
    files: tuple[DiffFileStat, ...]

    @property
    def files_changed(self) -> int:
        return len(self.files)

    def to_dict(self) -> dict[str, Any]:
        return {
            "insertions": self.insertions,
            "deletions": self.deletions,
            "files_changed": self.files_changed,
            "files": [file_stat.to_dict() for file_stat in self.files],
        }


@dataclass(frozen=True)
class FileDiff:
    """Unified diff text for a single changed file."""

    file: str
    diff: str

    def to_dict(self) -> dict[str, str]:
        return {"file": self.file, "diff": self.diff}


@dataclass(frozen=True)
class CommitSuggestions:
    """Heuristic flags that hint at the conventional commit type."""

    has_new_files: bool
    has_deleted_files: bool
    has_config_changes: bool
    has_doc_changes: bool

    def to_dict(self) -> dict[str, bool]:
        return {
            "has_new_files": self.has_new_files,
            "has_deleted_files": self.has_deleted_files,
            "has_config_changes": self.has_config_changes,
            "has_doc_changes": self.has_doc_changes,
        }


@dataclass(frozen=True)
class CommitAnalysisResult:
    """Diff statistics plus commit type suggestions."""

    changes: DiffSummary
    suggestions: CommitSuggestions

    def to_dict(self) -> dict[str, Any]:
        return {
            "changes": self.changes.to_dict(),
            "suggestions": self.suggestions.to_dict(),
        }


@dataclass(frozen=True)
class NoChangesResult:
    """Returned by the commit analysis when the working tree is clean."""

    message: str = "No changes detected to generate commit message for"

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}
