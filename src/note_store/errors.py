"""Typed exception hierarchy for note store errors.

This module defines all custom exceptions used by the note store.
All exceptions inherit from NoteStoreError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from typing import Optional

from src.confluence_client.errors import SyncError


class NoteStoreError(SyncError):
    """Base exception for all note store errors."""
    pass


class FilesystemError(NoteStoreError):
    """Raised when filesystem operations fail (read, write, permissions, etc)."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Filesystem operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class FrontmatterError(NoteStoreError):
    """Raised when YAML frontmatter parsing or validation fails."""

    def __init__(self, file_path: str, message: str):
        super().__init__(
            f"Frontmatter error in {file_path}: {message}"
        )
        self.file_path = file_path
        self.message = message
