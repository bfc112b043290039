"""Test fixtures for unit and integration tests.

This module provides:
- Sample markdown notes with and without frontmatter
- Canned Confluence REST API responses
"""

from .sample_notes import (
    SAMPLE_UNIQUE_ID,
    SAMPLE_NOTE_PLAIN,
    SAMPLE_NOTE_WITH_ID,
    SAMPLE_NOTE_WITH_ID_AND_TAGS,
    SAMPLE_NOTE_WITH_TAGS,
    SAMPLE_NOTE_MALFORMED,
)
from .confluence_responses import (
    TEST_HOST,
    TEST_TOKEN,
    TEST_PAGE_ID,
    get_sample_document,
    make_response,
)

__all__ = [
    "SAMPLE_UNIQUE_ID",
    "SAMPLE_NOTE_PLAIN",
    "SAMPLE_NOTE_WITH_ID",
    "SAMPLE_NOTE_WITH_ID_AND_TAGS",
    "SAMPLE_NOTE_WITH_TAGS",
    "SAMPLE_NOTE_MALFORMED",
    "TEST_HOST",
    "TEST_TOKEN",
    "TEST_PAGE_ID",
    "get_sample_document",
    "make_response",
]
