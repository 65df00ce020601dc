"""Exception hierarchy for directory listing and report formatting."""

from __future__ import annotations


class MinilsError(Exception):
    """Base class for recoverable listing failures reported by the CLI."""


class DirectoryReadError(MinilsError):
    """Raised when the target directory itself cannot be opened."""

    def __init__(self, directory: str, original_error: OSError) -> None:
        super().__init__(f"Could not read directory: {original_error}")
        self.directory = directory
        self.original_error = original_error


class FileEntryParsingError(MinilsError):
    """Base class for failures while turning one entry into report text."""


class UnableToCalculatePathLengths(FileEntryParsingError):
    """Raised when no entry exists to size the name column from."""

    def __init__(self) -> None:
        super().__init__("Unable to calculate path lengths: no entries to list")


class FileNameInvalidUnicode(FileEntryParsingError):
    """Raised when a path cannot be rendered as text."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File name cannot be rendered as text: {path!r}")
        self.path = path


class MissingMetaDataError(FileEntryParsingError):
    """Raised when timestamps or permissions are unavailable for an entry."""

    def __init__(self, path: str, original_error: OSError | None = None) -> None:
        detail = f": {original_error}" if original_error is not None else ""
        super().__init__(f"Missing metadata for {path}{detail}")
        self.path = path
        self.original_error = original_error


class MinimumWidthError(ValueError):
    """Raised when extended output is requested for a too-narrow display.

    This is a usage error rather than a listing failure, so it does not derive
    from ``MinilsError``.
    """

    def __init__(self, width: int, minimum: int) -> None:
        super().__init__(f"extended output requires a display width above {minimum} columns (got {width})")
        self.width = width
        self.minimum = minimum


__all__ = [
    "MinilsError",
    "DirectoryReadError",
    "FileEntryParsingError",
    "UnableToCalculatePathLengths",
    "FileNameInvalidUnicode",
    "MissingMetaDataError",
    "MinimumWidthError",
]
