"""Service for filtering noise paths out of diffs."""


class FileFilterService:
    """Service for detecting paths that should never reach a review."""

    # Build output and lockfiles, matched against the exact path git reports
    EXCLUDED_PATHS: frozenset[str] = frozenset(
        {
            "dist",
            "bun.lock",
        }
    )

    def __init__(self, excluded_paths: frozenset[str] | None = None) -> None:
        """
        Initialize FileFilterService.

        Args:
            excluded_paths: Paths to exclude. Defaults to EXCLUDED_PATHS
        """
        self._excluded_paths = (
            self.EXCLUDED_PATHS if excluded_paths is None else excluded_paths
        )

    def is_excluded(self, file_path: str) -> bool:
        """
        Check if a file is on the exclusion list.

        Args:
            file_path: Path to the file as listed by the diff summary

        Returns:
            True if the file must be skipped, False otherwise
        """
        return file_path in self._excluded_paths
