"""Service for writing markdown documentation files."""

import logging

from diff_agents.docs.domain.value_objects import MarkdownWriteRequest, MarkdownWriteResult

logger = logging.getLogger(__name__)


class MarkdownService:
    """Service for persisting markdown produced by an agent."""

    def write(self, request: MarkdownWriteRequest) -> MarkdownWriteResult:
        """
        Write a markdown file, overwriting any existing file.

        Args:
            request: File path, content and optional title

        Returns:
            MarkdownWriteResult; on failure success is False and error is set
        """
        markdown_content = request.render()

        try:
            request.file_path.write_text(markdown_content, encoding="utf-8")
        except (OSError, ValueError) as e:
            logger.warning("Could not write markdown file %s: %s", request.file_path, e)
            return MarkdownWriteResult(
                success=False,
                file_path=request.file_path,
                error=str(e) or e.__class__.__name__,
            )

        logger.debug("Wrote %d characters to %s", len(markdown_content), request.file_path)
        return MarkdownWriteResult(
            success=True,
            file_path=request.file_path,
            message=f"Markdown file created successfully at {request.file_path}",
            content_length=len(markdown_content),
        )
