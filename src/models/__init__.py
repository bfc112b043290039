"""Data models for Confluence content."""

from src.models.remote_document import RemoteDocument

__all__ = ['RemoteDocument']
