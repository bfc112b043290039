"""Data models for persisted settings."""

from dataclasses import dataclass, field
from typing import Dict


DEFAULT_TIMEOUT = 30


@dataclass
class Settings:
    """Process-wide settings persisted between invocations.

    Attributes:
        confluence_host: Confluence base URL (e.g., https://confluence.example.com)
        personal_access_token: Personal access token sent as a bearer token
        mapping: Dict mapping note uniqueId to Confluence page ID ("" = not connected)
        timeout: Request timeout in seconds for Confluence API calls

    Example:
        >>> settings = Settings(confluence_host="https://confluence.example.com")
        >>> settings.mapping["0b6f..."] = "12345"
    """
    confluence_host: str = ""
    personal_access_token: str = ""
    mapping: Dict[str, str] = field(default_factory=dict)
    timeout: int = DEFAULT_TIMEOUT
