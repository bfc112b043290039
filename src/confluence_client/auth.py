"""Authentication module for resolving Confluence credentials.

Credentials come from the settings file first. When a field is empty there,
it falls back to environment variables, loaded from a .env file using
python-dotenv. Only a static personal access token is supported; it is sent
as a bearer token on every request.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from src.settings.settings_repository import SettingsRepository
from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """Confluence API credentials."""
    url: str
    token: str
    timeout: int


class Authenticator:
    """Resolves and validates Confluence credentials.

    Credentials are never cached or logged to prevent security risks.

    Fallback environment variables:
        CONFLUENCE_HOST: Confluence base URL (e.g., https://confluence.example.com)
        CONFLUENCE_PERSONAL_TOKEN: Personal access token

    Raises:
        InvalidCredentialsError: If the host or token is missing

    Example:
        >>> auth = Authenticator(SettingsRepository.load())
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self, settings_repository: SettingsRepository):
        """Initialize the authenticator by loading environment variables from .env file."""
        self._settings_repository = settings_repository
        load_dotenv()

    def get_credentials(self) -> Credentials:
        """Get Confluence credentials from settings or the environment.

        Returns:
            Credentials: A named tuple containing url, token and timeout

        Raises:
            InvalidCredentialsError: If the host or token is missing
        """
        settings = self._settings_repository.settings
        url = settings.confluence_host or os.getenv('CONFLUENCE_HOST', '')
        token = settings.personal_access_token or os.getenv('CONFLUENCE_PERSONAL_TOKEN', '')

        if not url:
            raise InvalidCredentialsError(
                endpoint="unknown",
                reason="Confluence host is not configured"
            )
        if not token:
            raise InvalidCredentialsError(
                endpoint=url,
                reason="personal access token is not configured"
            )

        return Credentials(url=url.rstrip('/'), token=token, timeout=settings.timeout)
