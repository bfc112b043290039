"""Typed exception hierarchy for settings errors.

All exceptions inherit from SettingsError so callers can catch any
settings failure in one place.
"""

from typing import Optional

from src.confluence_client.errors import SyncError


class SettingsError(SyncError):
    """Base exception for all settings errors."""
    pass


class InvalidSettingsError(SettingsError):
    """Raised when the settings file content is malformed."""

    def __init__(self, message: str, settings_field: Optional[str] = None):
        if settings_field:
            full_message = f"Settings error in field '{settings_field}': {message}"
        else:
            full_message = f"Settings error: {message}"
        super().__init__(full_message)
        self.settings_field = settings_field
        self.original_message = message


class SettingsFilesystemError(SettingsError):
    """Raised when the settings file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: Optional[str] = None):
        message = f"Settings file operation '{operation}' failed for {file_path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
