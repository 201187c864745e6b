"""Notion API client."""

import httpx
from typing import Any, Dict, List, Optional
import json
import logging

from config import Settings
from errors import RemoteFailure, RemoteRejected, RemoteUnavailable
from models import PropertyValue, serialize_properties
from .base import RemoteStore

logger = logging.getLogger(__name__)

# Statuses that mean "try again later" rather than "bad payload"
UNAVAILABLE_STATUSES = {401, 403, 429}


class NotionClient(RemoteStore):
    """Remote store backed by the Notion REST API.

    Each call opens its own ``httpx.AsyncClient``; nothing is shared between
    requests apart from the immutable settings passed in here.
    """

    def __init__(self, config: Settings):
        self.api_key = config.notion_api_key
        self.base_url = config.notion_api_url.rstrip("/")
        self.notion_version = config.notion_version
        self.timeout = config.notion_timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Notion-Version": self.notion_version,
            "Content-Type": "application/json"
        }

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError):
            return response.text or f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("message"):
            return f"{body.get('code', 'error')}: {body['message']}"
        return response.text or f"HTTP {response.status_code}"

    async def _request(self, operation: str, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Issue one Notion API call, translating failures into RemoteFailure."""
        if not self.api_key:
            message = "Notion API key is not configured"
            logger.error(f"Notion {operation} failed: {message}")
            raise RemoteUnavailable(message, operation=operation)

        request_args = {
            "method": method,
            "url": f"{self.base_url}{path}",
            "headers": self._headers(),
            "timeout": self.timeout
        }
        if body is not None:
            request_args["json"] = body

        try:
            async with httpx.AsyncClient() as client:
                logger.debug(f"Notion {operation}: {method} {path}")
                response = await client.request(**request_args)
        except httpx.TimeoutException as e:
            message = f"Request timeout after {self.timeout} seconds"
            logger.error(f"Notion {operation} failed: {message}")
            raise RemoteUnavailable(message, operation=operation) from e
        except httpx.HTTPError as e:
            message = f"HTTP request failed: {str(e)}"
            logger.error(f"Notion {operation} failed: {message}")
            raise RemoteUnavailable(message, operation=operation) from e

        if 200 <= response.status_code < 300:
            try:
                payload = response.json()
            except (json.JSONDecodeError, ValueError) as e:
                logger.error(f"Notion {operation} failed: invalid JSON response")
                raise RemoteUnavailable("Invalid JSON response", operation=operation) from e
            if not isinstance(payload, dict):
                logger.error(f"Notion {operation} failed: response body is not a JSON object")
                raise RemoteUnavailable("Unexpected response body", operation=operation)
            return payload

        message = self._error_message(response)
        logger.error(f"Notion {operation} failed ({response.status_code}): {message}")

        if response.status_code in UNAVAILABLE_STATUSES or response.status_code >= 500:
            raise RemoteUnavailable(message, operation=operation, remote_status=response.status_code)
        raise RemoteRejected(message, operation=operation, remote_status=response.status_code)

    async def query(
        self,
        collection_id: str,
        sorts: Optional[List[Dict[str, Any]]] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        body: Dict[str, Any] = {}
        if sorts:
            body["sorts"] = sorts
        if limit is not None:
            body["page_size"] = limit

        payload = await self._request("query", "POST", f"/v1/databases/{collection_id}/query", body)
        results = payload.get("results")
        if not isinstance(results, list):
            logger.error("Notion query failed: response has no results list")
            raise RemoteFailure("Query response has no results", operation="query")
        return results

    async def create_record(self, collection_id: str, properties: Dict[str, PropertyValue]) -> str:
        body = {
            "parent": {"database_id": collection_id},
            "properties": serialize_properties(properties)
        }
        payload = await self._request("create_record", "POST", "/v1/pages", body)
        record_id = payload.get("id")
        logger.info(f"Created Notion page {record_id} in database {collection_id}")
        return record_id

    async def update_record(
        self,
        record_id: str,
        properties: Optional[Dict[str, PropertyValue]] = None,
        archived: Optional[bool] = None
    ) -> Dict[str, Any]:
        if not properties and archived is None:
            raise ValueError("update_record needs properties or an archived flag")

        body: Dict[str, Any] = {}
        if properties:
            body["properties"] = serialize_properties(properties)
        if archived is not None:
            body["archived"] = archived

        operation = "archive_record" if archived else "update_record"
        return await self._request(operation, "PATCH", f"/v1/pages/{record_id}", body)
