"""Typed exception hierarchy for CLI-related errors.

This module defines all custom exceptions used by the CLI.
All exceptions inherit from CLIError base class for easy catching and
include descriptive messages with context to help with debugging.
"""

from src.confluence_client.errors import SyncError


class CLIError(SyncError):
    """Base exception for all CLI-related errors."""
    pass


class ConnectionInputError(CLIError):
    """Raised when the page reference entered for a connection is empty."""

    def __init__(self, message: str = "A Confluence page ID is required"):
        super().__init__(message)
