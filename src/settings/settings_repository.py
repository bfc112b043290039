"""Settings file loading, validation, and saving.

This module handles the persisted settings record that every component
reads from: the Confluence host, the personal access token, the request
timeout and the uniqueId -> page ID mapping. Settings are loaded once at
startup and written back after every mutation.
"""

import logging
import os
import shutil
import tempfile
from typing import Any, Dict, Optional

import yaml

from .errors import InvalidSettingsError, SettingsFilesystemError
from .models import DEFAULT_TIMEOUT, Settings

logger = logging.getLogger(__name__)


class SettingsRepository:
    """Owns the in-memory Settings record and its YAML file.

    Components receive the repository explicitly instead of reaching for
    process-wide state. Every mutating method persists immediately.

    Settings file structure:
        confluenceHost: "https://confluence.example.com"
        personalAccessToken: "..."
        timeout: 30
        mapping:
          0b6f3f7e-...: "12345"
          9d1c22aa-...: ""

    If the file is missing or empty, defaults are used and the file is
    created on the first save.

    Example:
        >>> repo = SettingsRepository.load(".confluence-note-sync/settings.yaml")
        >>> repo.update(confluence_host="https://confluence.example.com")
    """

    DEFAULT_SETTINGS_DIR = '.confluence-note-sync'
    DEFAULT_SETTINGS_FILE = 'settings.yaml'
    DEFAULT_SETTINGS_PATH = f'{DEFAULT_SETTINGS_DIR}/{DEFAULT_SETTINGS_FILE}'

    # Keys used in the persisted document
    HOST_KEY = 'confluenceHost'
    TOKEN_KEY = 'personalAccessToken'
    MAPPING_KEY = 'mapping'
    TIMEOUT_KEY = 'timeout'

    def __init__(self, settings_path: str, settings: Optional[Settings] = None):
        self.settings_path = settings_path
        self.settings = settings or Settings()

    @classmethod
    def load(cls, settings_path: str = DEFAULT_SETTINGS_PATH) -> 'SettingsRepository':
        """Load settings from a YAML file.

        Args:
            settings_path: Path to the YAML settings file

        Returns:
            SettingsRepository holding the parsed settings

        Raises:
            SettingsFilesystemError: If file cannot be read (except FileNotFoundError)
            InvalidSettingsError: If settings file is invalid or malformed
        """
        try:
            with open(settings_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug(f"No settings file at {settings_path}, using defaults")
            return cls(settings_path)
        except PermissionError:
            raise SettingsFilesystemError(settings_path, 'read', 'Permission denied')
        except OSError as e:
            raise SettingsFilesystemError(settings_path, 'read', str(e))

        if not content.strip():
            return cls(settings_path)

        try:
            settings_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise InvalidSettingsError(f"Invalid YAML syntax: {str(e)}")

        if settings_dict is None:
            return cls(settings_path)

        if not isinstance(settings_dict, dict):
            raise InvalidSettingsError(
                f"Settings must be a YAML dictionary, got {type(settings_dict).__name__}"
            )

        return cls(settings_path, cls._parse_settings(settings_dict))

    def save(self) -> None:
        """Write the current settings to the YAML file.

        Raises:
            SettingsFilesystemError: If file cannot be written
        """
        settings_dict = {
            self.HOST_KEY: self.settings.confluence_host,
            self.TOKEN_KEY: self.settings.personal_access_token,
            self.TIMEOUT_KEY: self.settings.timeout,
            self.MAPPING_KEY: dict(self.settings.mapping),
        }

        yaml_str = yaml.safe_dump(
            settings_dict,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        settings_dir = os.path.dirname(os.path.abspath(self.settings_path))
        try:
            os.makedirs(settings_dir, exist_ok=True)
        except OSError as e:
            raise SettingsFilesystemError(settings_dir, 'create_directory', str(e))

        # Write to a temp file and move it over, so the mapping is never truncated
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix='.', suffix='.tmp', dir=settings_dir
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
            if os.path.exists(self.settings_path):
                shutil.copymode(self.settings_path, temp_path)
            os.replace(temp_path, self.settings_path)
            temp_path = None
        except PermissionError:
            raise SettingsFilesystemError(self.settings_path, 'write', 'Permission denied')
        except OSError as e:
            raise SettingsFilesystemError(self.settings_path, 'write', str(e))
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                try:
                    os.remove(temp_path)
                except OSError as e:
                    logger.warning(f"Failed to remove temp file {temp_path}: {e}")

        logger.debug(f"Saved settings to {self.settings_path}")

    def update(
        self,
        confluence_host: Optional[str] = None,
        personal_access_token: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> None:
        """Change one or more connection fields and persist immediately.

        Args:
            confluence_host: New Confluence base URL (None leaves it unchanged)
            personal_access_token: New access token (None leaves it unchanged)
            timeout: New request timeout in seconds (None leaves it unchanged)

        Raises:
            InvalidSettingsError: If timeout is not a positive integer
            SettingsFilesystemError: If file cannot be written
        """
        if timeout is not None and timeout <= 0:
            raise InvalidSettingsError("Timeout must be a positive number of seconds", self.TIMEOUT_KEY)

        if confluence_host is not None:
            self.settings.confluence_host = confluence_host.strip()
        if personal_access_token is not None:
            self.settings.personal_access_token = personal_access_token.strip()
        if timeout is not None:
            self.settings.timeout = timeout
        self.save()

    @classmethod
    def _parse_settings(cls, settings_dict: Dict[str, Any]) -> Settings:
        """Parse and validate a settings dictionary.

        Args:
            settings_dict: Raw settings dictionary from YAML

        Returns:
            Validated Settings object

        Raises:
            InvalidSettingsError: If settings are invalid
        """
        host = settings_dict.get(cls.HOST_KEY) or ""
        if not isinstance(host, str):
            raise InvalidSettingsError(
                f"Field must be a string, got {type(host).__name__}",
                cls.HOST_KEY
            )

        token = settings_dict.get(cls.TOKEN_KEY) or ""
        if not isinstance(token, str):
            raise InvalidSettingsError(
                f"Field must be a string, got {type(token).__name__}",
                cls.TOKEN_KEY
            )

        timeout = settings_dict.get(cls.TIMEOUT_KEY, DEFAULT_TIMEOUT)
        if timeout is None:
            timeout = DEFAULT_TIMEOUT
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise InvalidSettingsError(
                f"Field must be a positive integer, got {timeout!r}",
                cls.TIMEOUT_KEY
            )

        mapping = settings_dict.get(cls.MAPPING_KEY) or {}
        if not isinstance(mapping, dict):
            raise InvalidSettingsError(
                f"Field must be a dictionary, got {type(mapping).__name__}",
                cls.MAPPING_KEY
            )

        # Page IDs are often written unquoted in YAML and load as ints
        parsed_mapping: Dict[str, str] = {}
        for unique_id, page_id in mapping.items():
            if not isinstance(unique_id, str):
                raise InvalidSettingsError(
                    f"Keys must be strings, got {type(unique_id).__name__}",
                    cls.MAPPING_KEY
                )
            if page_id is None:
                page_id = ""
            if isinstance(page_id, bool) or not isinstance(page_id, (str, int)):
                raise InvalidSettingsError(
                    f"Values must be strings, got {type(page_id).__name__}",
                    cls.MAPPING_KEY
                )
            parsed_mapping[unique_id] = str(page_id)

        return Settings(
            confluence_host=host.strip(),
            personal_access_token=token.strip(),
            mapping=parsed_mapping,
            timeout=timeout,
        )
