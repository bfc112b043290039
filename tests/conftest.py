"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest

# atlassian-python-api logs lookup failures at ERROR level; keep test output quiet.
logging.getLogger("atlassian").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers added by _configure_logging so CLI runs don't accumulate them."""
    yield
    app_logger = logging.getLogger("src")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep real Confluence credentials and .env files out of tests."""
    monkeypatch.delenv("CONFLUENCE_HOST", raising=False)
    monkeypatch.delenv("CONFLUENCE_PERSONAL_TOKEN", raising=False)
    monkeypatch.setattr("src.confluence_client.auth.load_dotenv", lambda *args, **kwargs: False)
