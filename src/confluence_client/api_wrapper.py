"""API wrapper for the Confluence REST content API.

This module wraps the atlassian-python-api Confluence client and provides
error translation from HTTP responses to our typed exception hierarchy.
Requests go through the client's authenticated requests session so that
status codes can be checked directly.
"""

import logging
import re
from typing import Any, Dict, Optional, Tuple

from atlassian import Confluence
from requests import Response
from requests.exceptions import RequestException, Timeout, ConnectionError

from src.models.remote_document import RemoteDocument
from .auth import Authenticator, Credentials
from .errors import (
    InvalidCredentialsError,
    PageNotFoundError,
    InvalidPageIdError,
    APIUnreachableError,
    APIAccessError,
)

logger = logging.getLogger(__name__)


# Confluence editor markup for the markdown macro; the note text goes into <pre> verbatim
MARKDOWN_MACRO_TEMPLATE = (
    '<p class="auto-cursor-target"><br /></p>'
    '<table class="wysiwyg-macro" '
    'style="background-image: url(\'{placeholder_url}\'); background-repeat: no-repeat;" '
    'data-macro-name="markdown" data-macro-schema-version="1" '
    'data-macro-body-type="PLAIN_TEXT" data-mce-resize="false">'
    '<tbody><tr><td class="wysiwyg-macro-body"><pre>{body}</pre></td></tr></tbody>'
    '</table>'
    '<p class="auto-cursor-target"><br /></p>'
)

MACRO_PLACEHOLDER_PATH = (
    "/plugins/servlet/confluence/placeholder/macro-heading"
    "?definition=e21hcmtkb3dufQ&amp;locale=en_GB&amp;version=2"
)


def wrap_body(body_text: str, host: str) -> str:
    """Embed note text in the markdown macro editor markup.

    Args:
        body_text: Note text, inserted verbatim (no escaping or conversion)
        host: Confluence base URL used for the macro placeholder image

    Returns:
        str: Editor-representation markup for the page body
    """
    return MARKDOWN_MACRO_TEMPLATE.format(
        placeholder_url=host.rstrip('/') + MACRO_PLACEHOLDER_PATH,
        body=body_text,
    )


class APIWrapper:
    """Wrapper around atlassian-python-api Confluence client with error translation.

    This class provides a thin wrapper over the Confluence API client that:
    1. Authenticates with a static bearer token from the Authenticator
    2. Translates HTTP errors to typed exceptions
    3. Performs the read-modify-write used to replace a page body

    There is no retry and no compare-and-swap: a concurrent edit made between
    the GET and the PUT is overwritten.

    Example:
        >>> api = APIWrapper(Authenticator(SettingsRepository.load()))
        >>> api.replace_document("123456", "# Notes", "Meeting notes")
        True
    """

    CONTENT_PATH = "rest/api/content"

    def __init__(self, authenticator: Authenticator):
        """Initialize the API wrapper with authentication credentials.

        Args:
            authenticator: Authenticator instance for resolving credentials
        """
        self._authenticator = authenticator
        self._client: Optional[Confluence] = None
        self._credentials: Optional[Credentials] = None

    def _get_client(self) -> Tuple[Confluence, Credentials]:
        """Get or create the Confluence API client.

        This method lazily initializes the Confluence client on first use
        and validates credentials.

        Returns:
            Tuple of the atlassian-python-api Confluence client and the
            credentials it was created with

        Raises:
            InvalidCredentialsError: If host or token is missing
        """
        if self._client is None or self._credentials is None:
            creds = self._authenticator.get_credentials()
            self._client = Confluence(
                url=creds.url,
                token=creds.token,
                timeout=creds.timeout,
            )
            self._credentials = creds
        return self._client, self._credentials

    def _content_url(self, creds: Credentials, page_id: str) -> str:
        return f"{creds.url}/{self.CONTENT_PATH}/{page_id}"

    def _validate_page_id(self, page_id: str) -> None:
        """Validate that a page ID is in the correct format.

        Page IDs are interpolated into the request path as given, so the
        whole value must be digits (no surrounding whitespace).

        Raises:
            InvalidPageIdError: If page_id is empty or not numeric
        """
        if not isinstance(page_id, str) or not re.fullmatch(r'[0-9]+', page_id):
            raise InvalidPageIdError(page_id)

    def _sanitize_credentials(self, text: str) -> str:
        """Sanitize error messages to prevent credential leakage.

        Example:
            >>> api._sanitize_credentials("Authorization: Bearer abc123")
            'Authorization: ***REDACTED***'
        """
        if not text:
            return text

        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'(access_?token|api_?token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
            r'\1=***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )

        # The configured token itself, wherever it appears
        if self._credentials and self._credentials.token:
            sanitized = sanitized.replace(self._credentials.token, '***REDACTED***')

        return sanitized

    def _translate_transport_error(
        self,
        exception: RequestException,
        creds: Credentials,
        operation: str
    ) -> Exception:
        """Translate a requests exception raised before any response arrived."""
        if isinstance(exception, (Timeout, ConnectionError)):
            logger.error(f"{operation} could not reach {creds.url}")
            return APIUnreachableError(endpoint=creds.url)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"Confluence API failure during {operation}")

    def _translate_status(
        self,
        response: Response,
        creds: Credentials,
        page_id: str,
        operation: str
    ) -> Exception:
        """Translate a non-200 response to a typed exception."""
        status_code = response.status_code

        if status_code in (401, 403):
            return InvalidCredentialsError(
                endpoint=creds.url,
                reason=f"HTTP {status_code}"
            )
        if status_code == 404:
            return PageNotFoundError(page_id=page_id)

        safe_body = self._sanitize_credentials(response.text or "")[:200]
        logger.error(f"API operation failed: {operation} - HTTP {status_code}: {safe_body}")
        return APIAccessError(f"Confluence API failure during {operation} (HTTP {status_code})")

    def get_document(self, page_id: str) -> RemoteDocument:
        """Fetch a page to read its current version and type.

        Args:
            page_id: The Confluence page ID

        Returns:
            RemoteDocument decoded from the HTTP 200 response

        Raises:
            InvalidPageIdError: If page_id is not numeric
            InvalidCredentialsError: If credentials are missing or rejected
            PageNotFoundError: If page doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: On any other non-200 status or undecodable body
        """
        self._validate_page_id(page_id)
        client, creds = self._get_client()
        url = self._content_url(creds, page_id)
        operation = f"get_document({page_id})"

        logger.debug(f"GET {url}")
        try:
            response = client._session.get(url, timeout=creds.timeout)
        except RequestException as e:
            raise self._translate_transport_error(e, creds, operation) from e

        if response.status_code != 200:
            raise self._translate_status(response, creds, page_id, operation)

        try:
            return RemoteDocument.from_api(response.json())
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected response body for {operation}: {e}")
            raise APIAccessError(f"Unexpected response from Confluence during {operation}") from e

    def build_update_payload(
        self,
        document: RemoteDocument,
        body_text: str,
        title: str,
        host: str
    ) -> Dict[str, Any]:
        """Build the PUT payload that replaces a page body.

        Args:
            document: Current state of the page (version and type are used)
            body_text: Note text to embed in the page
            title: New page title
            host: Confluence base URL, used by the macro placeholder

        Returns:
            Dict with the next version number, type, title and editor body
        """
        return {
            "version": {
                "number": document.version + 1
            },
            "type": document.type,
            "title": title,
            "body": {
                "storage": {
                    "value": wrap_body(body_text, host),
                    "representation": "editor"
                }
            }
        }

    def replace_document(self, page_id: str, body_text: str, title: str) -> bool:
        """Replace a page's body and title, bumping its version.

        Reads the page first; if the read fails the exception propagates and
        no update is sent.

        Args:
            page_id: The Confluence page ID
            body_text: Note text to embed verbatim in the page
            title: Page title to set

        Returns:
            True if the PUT responded HTTP 200, False otherwise

        Raises:
            InvalidPageIdError: If page_id is not numeric
            InvalidCredentialsError: If the read is rejected
            PageNotFoundError: If page doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: If the read fails with another status
        """
        document = self.get_document(page_id)
        client, creds = self._get_client()
        url = self._content_url(creds, page_id)
        payload = self.build_update_payload(document, body_text, title, creds.url)
        operation = f"replace_document({page_id})"

        logger.debug(f"PUT {url} (version {document.version} -> {document.version + 1})")
        try:
            response = client._session.put(
                url,
                json=payload,
                headers={'Content-Type': 'application/json;charset=utf-8'},
                timeout=creds.timeout,
            )
        except RequestException as e:
            raise self._translate_transport_error(e, creds, operation) from e

        if response.status_code == 200:
            logger.info(f"Updated page {page_id} to version {document.version + 1}")
            return True

        if response.status_code == 409:
            logger.warning(
                f"Version conflict updating page {page_id} "
                f"(version {document.version} is stale)"
            )
        else:
            safe_body = self._sanitize_credentials(response.text or "")[:200]
            logger.error(f"{operation} failed - HTTP {response.status_code}: {safe_body}")
        return False
