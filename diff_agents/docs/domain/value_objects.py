"""Value objects for Docs domain."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class MarkdownWriteRequest:
    """A markdown payload and where to put it."""

    file_path: Path
    content: str
    title: str | None = None

    def render(self) -> str:
        """Return the text to write, with a level-1 heading when a title is set."""
        if self.title:
            return f"# {self.title}\n\n{self.content}"
        return self.content


@dataclass(frozen=True)
class MarkdownWriteResult:
    """Outcome of a markdown write; failures are reported here instead of raised."""

    success: bool
    file_path: Path
    message: str | None = None
    content_length: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {
                "success": True,
                "file_path": str(self.file_path),
                "message": self.message,
                "content_length": self.content_length,
            }
        return {
            "success": False,
            "error": self.error,
            "file_path": str(self.file_path),
        }
