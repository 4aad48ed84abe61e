"""Exception hierarchy for mdxpack."""

from pathlib import Path


class MdxpackError(Exception):
    """Base class for every error mdxpack raises on purpose."""


class FileSystemError(MdxpackError):
    """Raised when a scan, read or write against the filesystem fails."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ConfigError(MdxpackError):
    """Raised when runtime configuration cannot be loaded or validated."""
