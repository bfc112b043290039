"""Pytest configuration and fixtures for integration tests."""

from unittest.mock import Mock, patch

import pytest

from tests.fixtures.confluence_responses import get_sample_document, make_response


@pytest.fixture
def vault(tmp_path):
    """Temporary note vault with its own settings file path."""
    notes_dir = tmp_path / "notes"
    notes_dir.mkdir()
    return tmp_path


@pytest.fixture
def settings_path(vault):
    return vault / ".confluence-note-sync" / "settings.yaml"


@pytest.fixture
def mock_session():
    """Patch the Confluence client so only its HTTP session is observed."""
    with patch('src.confluence_client.api_wrapper.Confluence') as mock_confluence:
        client = Mock()
        client._session.get.return_value = make_response(200, get_sample_document(version=7))
        client._session.put.return_value = make_response(200, {})
        mock_confluence.return_value = client
        yield mock_confluence, client._session
