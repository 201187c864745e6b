"""Base remote store interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from models import PropertyValue


class RemoteStore(ABC):
    """Authenticated access to the document database behind the gateway."""

    @abstractmethod
    async def query(
        self,
        collection_id: str,
        sorts: Optional[List[Dict[str, Any]]] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Return the raw records of a collection, in remote order."""
        pass

    @abstractmethod
    async def create_record(self, collection_id: str, properties: Dict[str, PropertyValue]) -> str:
        """Create a record and return its id."""
        pass

    @abstractmethod
    async def update_record(
        self,
        record_id: str,
        properties: Optional[Dict[str, PropertyValue]] = None,
        archived: Optional[bool] = None
    ) -> Dict[str, Any]:
        """Partially update a record's properties and/or archived flag."""
        pass

    async def archive_record(
        self,
        record_id: str,
        properties: Optional[Dict[str, PropertyValue]] = None
    ) -> Dict[str, Any]:
        """Soft-delete a record. Records are never physically removed."""
        return await self.update_record(record_id, properties=properties, archived=True)
