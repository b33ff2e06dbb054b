"""Exceptions raised while resolving, planning and applying renames."""

from pathlib import Path
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from stripfix.models.named_path import SkippedItem


class StripfixError(Exception):
    """Base class for errors that abort a run before any file is renamed."""


class InvalidPathError(StripfixError):
    """Raised when a path has no usable final component."""

    def __init__(self, path: Path, reason: str = "has no file name") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Path {path} {reason}")


class NoCandidatesError(StripfixError):
    """Raised when no file is left to operate on."""

    def __init__(self, skipped: "list[SkippedItem] | None" = None) -> None:
        self.skipped = skipped or []
        super().__init__("None of the specified files could be affected")


class PrefixNotFoundError(StripfixError):
    """Raised when the candidate names share no common prefix."""

    def __init__(self) -> None:
        super().__init__("Couldn't guess a prefix")


class SourceDirectoryError(StripfixError):
    """Raised when the source directory cannot be listed."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"Couldn't open directory {directory}: {cause.strerror or cause}")


class ConfirmationError(StripfixError):
    """Raised when the confirmation prompt cannot be read."""

    def __init__(self) -> None:
        super().__init__("Couldn't read confirmation from input")
