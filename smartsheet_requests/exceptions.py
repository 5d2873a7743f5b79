"""
Exception hierarchy.

Every error raised by request composition derives from `SmartsheetError`.
Transport failures are not wrapped; they surface as the transport raised them.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class SmartsheetError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(SmartsheetError):
    """Client configuration is incomplete (e.g. no access token)."""


class MissingPathValueError(SmartsheetError):
    """A URL path placeholder has no value in the request spec."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing value for URL path placeholder: {name}")
        self.name = name


class UnsupportedFileTypeError(SmartsheetError):
    """An import file type tag is not one of the supported types."""

    def __init__(self, file_type: str, valid_types: Sequence[str]) -> None:
        self.file_type = file_type
        self.valid_types = tuple(valid_types)
        super().__init__(
            f"File type must be one of: {', '.join(self.valid_types)} (got {file_type!r})"
        )


class FileSpecError(SmartsheetError):
    """A path-backed file payload could not be accessed."""

    def __init__(self, message: str, *, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class ImportFileNotFoundError(FileSpecError):
    """The file behind a path-backed payload does not exist."""


class ImportFileUnreadableError(FileSpecError):
    """The file behind a path-backed payload exists but cannot be read."""
