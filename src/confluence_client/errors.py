"""Typed exception hierarchy for Confluence-related errors.

This module defines all custom exceptions used by the Confluence client library.
All exceptions inherit from ConfluenceError base class for easy catching and
include descriptive messages with context to help with debugging.
"""


class SyncError(Exception):
    """Base exception for all confluence-note-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class ConfluenceError(SyncError):
    """Base exception for all Confluence-related errors."""
    pass


class InvalidCredentialsError(ConfluenceError):
    """Raised when the host or access token is missing, or authentication fails."""

    def __init__(self, endpoint: str, reason: str = "access token is invalid"):
        super().__init__(f"Authentication failed ({reason}, endpoint: {endpoint})")
        self.endpoint = endpoint
        self.reason = reason


class PageNotFoundError(ConfluenceError):
    """Raised when a requested page does not exist."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class InvalidPageIdError(ConfluenceError):
    """Raised when a page ID is not a numeric Confluence content ID."""

    def __init__(self, page_id: str):
        super().__init__(
            f"Invalid page_id format: '{page_id}'. "
            f"Page IDs must contain only numeric characters."
        )
        self.page_id = page_id


class APIUnreachableError(ConfluenceError):
    """Raised when the Confluence API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(ConfluenceError):
    """Raised when the API answers with an unexpected status."""

    def __init__(self, message: str = "Confluence API failure"):
        super().__init__(message)
