"""Remote store clients."""

from .base import RemoteStore
from .notion_client import NotionClient

__all__ = [
    "RemoteStore",
    "NotionClient"
]
