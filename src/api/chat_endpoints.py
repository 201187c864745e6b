"""Fallback chat endpoint, used when the primary assistant network is down."""

from fastapi import APIRouter, Depends, Request
import logging

from config import Settings
from .dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/chat")
async def fallback_chat(request: Request, config: Settings = Depends(get_settings)):
    """Acknowledge a chat message with the canned fallback response.

    The body is read leniently so this endpoint always answers.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    message = payload.get("message") if isinstance(payload, dict) else None
    logger.info(f"Received fallback chat request: {message}")
    return {"response": config.chat_fallback_response}
