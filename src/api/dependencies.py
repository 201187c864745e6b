"""Dependency wiring for the FastAPI routes.

Tests replace these through ``app.dependency_overrides``.
"""

from config import Settings, settings
from remote import NotionClient, RemoteStore

_remote_store: RemoteStore = None


def get_settings() -> Settings:
    """Process-wide settings, read once at startup."""
    return settings


def get_remote_store() -> RemoteStore:
    """Return the shared Notion client, created on first use."""
    global _remote_store
    if _remote_store is None:
        _remote_store = NotionClient(settings)
    return _remote_store
