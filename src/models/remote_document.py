"""Remote document data model."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class RemoteDocument:
    """Confluence content item as returned by the REST content API.

    Only the fields needed for a read-modify-write update are kept.

    Attributes:
        page_id: Confluence content ID
        type: Content type (e.g., "page", "blogpost"), copied into updates
        version: Current version number (updates send version + 1)
        title: Page title
        body: Page body in storage format, empty unless body.storage was expanded
    """
    page_id: str
    type: str
    version: int
    title: str
    body: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'RemoteDocument':
        """Build a RemoteDocument from a decoded API response.

        Raises:
            KeyError: If type or version.number is missing
        """
        body = data.get('body') or {}
        storage = body.get('storage') or {}
        return cls(
            page_id=str(data.get('id', '')),
            type=data['type'],
            version=int(data['version']['number']),
            title=data.get('title', ''),
            body=storage.get('value', ''),
        )
