"""API endpoints for the Notion-backed collections."""

from fastapi import APIRouter, HTTPException, Depends
from typing import Optional, Dict, Any
from pydantic import BaseModel
import logging

from config import Settings
from errors import ConfigurationMissing, ValidationFailed, RemoteFailure
from mapping import (
    build_subscription_update,
    build_task_properties,
    build_archive_reason,
    subscription_from_page,
    daily_reset_from_page,
    latest_reset_sort,
)
from models import TaskRecord
from remote import RemoteStore
from .dependencies import get_settings, get_remote_store

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_ARCHIVE_REASON = "Archived without specific reason."


# Pydantic models for request bodies
class TaskCreate(BaseModel):
    title: Optional[str] = None


class SubscriptionUpdate(BaseModel):
    updates: Optional[Dict[str, Any]] = None


class SubscriptionArchive(BaseModel):
    reason: Optional[str] = None


def require_collection(collection_id: Optional[str], message: str) -> str:
    """Fail closed when a collection is not configured."""
    if not collection_id:
        raise ConfigurationMissing(message)
    return collection_id


# Subscription endpoints
@router.get("/subscriptions")
async def list_subscriptions(
    config: Settings = Depends(get_settings),
    store: RemoteStore = Depends(get_remote_store)
):
    """List subscriptions with name and amount defaults applied."""
    database_id = require_collection(config.notion_subscriptions_db_id, "DB ID is not configured.")

    try:
        pages = await store.query(database_id)
    except RemoteFailure as e:
        logger.error(f"Notion fetch error (Subscriptions): {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch from Notion.")

    return {"items": [subscription_from_page(page).to_dict() for page in pages]}


@router.patch("/subscriptions/{subscription_id}")
async def update_subscription(
    subscription_id: str,
    body: Optional[SubscriptionUpdate] = None,
    config: Settings = Depends(get_settings),
    store: RemoteStore = Depends(get_remote_store)
):
    """
    Partially update a subscription.

    **Body Parameters:**
    - updates (object, required): any of `name`, `whatsapp`, `renewalDate`.
      Other keys are ignored.

    **Responses:**
    - 200: `{success, id, updates}`
    - 400: Missing id/updates, or no recognized keys
    - 500: Not configured, or Notion failure
    """
    require_collection(config.notion_subscriptions_db_id, "DB ID is not configured.")

    updates = body.updates if body else None
    if not subscription_id.strip() or updates is None:
        raise ValidationFailed("Subscription ID and updates required.")

    properties = build_subscription_update(updates)

    try:
        await store.update_record(subscription_id, properties=properties)
    except RemoteFailure as e:
        logger.error(f"Notion update error (Subscription): {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update subscription {subscription_id}.")

    return {"success": True, "id": subscription_id, "updates": updates}


@router.delete("/subscriptions/{subscription_id}")
async def archive_subscription(
    subscription_id: str,
    body: Optional[SubscriptionArchive] = None,
    config: Settings = Depends(get_settings),
    store: RemoteStore = Depends(get_remote_store)
):
    """Archive a subscription. The page is flagged, never removed."""
    require_collection(config.notion_subscriptions_db_id, "DB ID is not configured.")

    if not subscription_id.strip():
        raise ValidationFailed("Subscription ID required for archiving.")

    supplied_reason = body.reason if body else None
    properties = {}
    if supplied_reason:
        properties = build_archive_reason(config.notion_archive_reason_property, supplied_reason)
        if not properties:
            logger.warning(
                f"Archive reason for subscription {subscription_id} not stored: "
                "NOTION_ARCHIVE_REASON_PROPERTY is not set"
            )

    try:
        await store.archive_record(subscription_id, properties=properties or None)
    except RemoteFailure as e:
        logger.error(f"Notion archive error (Subscription): {e}")
        raise HTTPException(status_code=500, detail=f"Failed to archive subscription {subscription_id}.")

    return {
        "success": True,
        "id": subscription_id,
        "reason": supplied_reason or DEFAULT_ARCHIVE_REASON
    }


# Task endpoints
@router.post("/tasks", status_code=201)
async def create_task(
    task: Optional[TaskCreate] = None,
    config: Settings = Depends(get_settings),
    store: RemoteStore = Depends(get_remote_store)
):
    """Create a task page in the tasks database."""
    database_id = require_collection(config.notion_tasks_db_id, "Tasks DB ID is not configured.")

    title = task.title if task else None
    if not title:
        raise ValidationFailed("Task title required.")

    task_record = TaskRecord(title=title)

    try:
        await store.create_record(database_id, build_task_properties(task_record))
    except RemoteFailure as e:
        logger.error(f"Notion task creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create task in Notion.")

    return {"success": True, **task_record.to_dict()}


# Daily reset endpoints
@router.get("/resets")
async def latest_reset(
    config: Settings = Depends(get_settings),
    store: RemoteStore = Depends(get_remote_store)
):
    """Get the most recent daily reset entry, by Date."""
    database_id = require_collection(config.notion_dash_reset_db_id, "Reset DB ID is not configured.")

    try:
        pages = await store.query(database_id, sorts=latest_reset_sort(), limit=1)
    except RemoteFailure as e:
        logger.error(f"Notion fetch error (Resets): {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch daily resets from Notion.")

    if not pages:
        return {"item": None, "message": "No daily reset entries found."}

    return {"item": daily_reset_from_page(pages[0]).to_dict()}
