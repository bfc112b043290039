"""Confluence client library for note sync.

This package provides a thin abstraction over the Confluence REST content API
for reading a page's version and replacing its body.
"""

from .errors import (
    SyncError,
    ConfluenceError,
    InvalidCredentialsError,
    PageNotFoundError,
    InvalidPageIdError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "ConfluenceError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "InvalidPageIdError",
    "APIUnreachableError",
    "APIAccessError",
]
