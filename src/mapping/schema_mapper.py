"""Translation between caller-facing fields and Notion page properties."""

from typing import Any, Dict, Optional
import logging

from errors import ValidationFailed
from models import (
    TitleProperty,
    RichTextProperty,
    DateProperty,
    PropertyValue,
    SubscriptionRecord,
    TaskRecord,
    DailyResetRecord,
)

logger = logging.getLogger(__name__)

# Notion property names per collection
SUBSCRIPTION_NAME = "Nom"
SUBSCRIPTION_AMOUNT = "Montant"
SUBSCRIPTION_WHATSAPP = "WhatsApp"
SUBSCRIPTION_RENEWAL_DATE = "Renewal Date"

TASK_TITLE = "Title"

RESET_TITLE = "Name"
RESET_BIGGEST_WIN = "Biggest Win"
RESET_REFLECTION = "Reflection"
RESET_DATE = "Date"

# Inbound defaults
DEFAULT_SUBSCRIPTION_NAME = "Unnamed"
DEFAULT_SUBSCRIPTION_AMOUNT = 0
DEFAULT_RESET_TITLE = "Untitled Reset"
DEFAULT_RESET_BIGGEST_WIN = "Not specified."
DEFAULT_RESET_REFLECTION = "No reflection recorded."

NO_VALID_PROPERTIES = "No valid properties provided for update."


def _scalar_text(key: str, value: Any) -> str:
    # Numbers are written as their text, booleans and containers are rejected
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationFailed(f"Invalid value for '{key}'.")
    return value if isinstance(value, str) else str(value)


def build_subscription_update(updates: Dict[str, Any]) -> Dict[str, PropertyValue]:
    """Map a subscription update onto Notion properties.

    Recognized keys are ``name``, ``whatsapp`` and ``renewalDate``. A key is
    present when it exists with a non-null value, so an empty string still
    produces a property. Any other key is dropped.

    Raises:
        ValidationFailed: a recognized value has the wrong type, or nothing
            recognized was left to write.
    """
    properties: Dict[str, PropertyValue] = {}

    if updates.get("name") is not None:
        properties[SUBSCRIPTION_NAME] = TitleProperty(_scalar_text("name", updates["name"]))
    if updates.get("whatsapp") is not None:
        properties[SUBSCRIPTION_WHATSAPP] = RichTextProperty(
            _scalar_text("whatsapp", updates["whatsapp"])
        )
    if updates.get("renewalDate") is not None:
        start = updates["renewalDate"]
        if not isinstance(start, str) or not start:
            raise ValidationFailed("Invalid value for 'renewalDate'.")
        properties[SUBSCRIPTION_RENEWAL_DATE] = DateProperty(start)

    ignored = set(updates) - {"name", "whatsapp", "renewalDate"}
    if ignored:
        logger.debug(f"Ignoring unrecognized update keys: {sorted(ignored)}")

    if not properties:
        raise ValidationFailed(NO_VALID_PROPERTIES)
    return properties


def build_task_properties(task: TaskRecord) -> Dict[str, PropertyValue]:
    """Properties for a new task page."""
    return {TASK_TITLE: TitleProperty(task.title)}


def build_archive_reason(property_name: Optional[str], reason: str) -> Dict[str, PropertyValue]:
    """Properties that record why a page was archived, if a target exists."""
    if not property_name:
        return {}
    return {property_name: RichTextProperty(reason)}


def _first_plain_text(properties: Dict[str, Any], name: str, kind: str) -> Optional[str]:
    prop = properties.get(name)
    if not isinstance(prop, dict):
        return None
    fragments = prop.get(kind)
    if not isinstance(fragments, list) or not fragments:
        return None
    first = fragments[0]
    if not isinstance(first, dict):
        return None
    text = first.get("plain_text")
    if text is None:
        text = (first.get("text") or {}).get("content")
    return text or None


def _number(properties: Dict[str, Any], name: str) -> Optional[float]:
    prop = properties.get(name)
    if not isinstance(prop, dict):
        return None
    value = prop.get("number")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _date_start(properties: Dict[str, Any], name: str) -> Optional[str]:
    prop = properties.get(name)
    if not isinstance(prop, dict):
        return None
    date = prop.get("date")
    if not isinstance(date, dict):
        return None
    return date.get("start") or None


def _page_properties(page: Dict[str, Any]) -> Dict[str, Any]:
    properties = page.get("properties")
    return properties if isinstance(properties, dict) else {}


def subscription_from_page(page: Dict[str, Any]) -> SubscriptionRecord:
    properties = _page_properties(page)
    amount = _number(properties, SUBSCRIPTION_AMOUNT)
    return SubscriptionRecord(
        id=page.get("id"),
        name=_first_plain_text(properties, SUBSCRIPTION_NAME, "title") or DEFAULT_SUBSCRIPTION_NAME,
        # 0 stays 0, missing falls back
        amount=amount if amount is not None else DEFAULT_SUBSCRIPTION_AMOUNT,
        whatsapp=_first_plain_text(properties, SUBSCRIPTION_WHATSAPP, "rich_text"),
        renewal_date=_date_start(properties, SUBSCRIPTION_RENEWAL_DATE),
    )


def daily_reset_from_page(page: Dict[str, Any]) -> DailyResetRecord:
    properties = _page_properties(page)
    return DailyResetRecord(
        id=page.get("id"),
        title=_first_plain_text(properties, RESET_TITLE, "title") or DEFAULT_RESET_TITLE,
        biggest_win=(
            _first_plain_text(properties, RESET_BIGGEST_WIN, "rich_text")
            or DEFAULT_RESET_BIGGEST_WIN
        ),
        reflection=(
            _first_plain_text(properties, RESET_REFLECTION, "rich_text")
            or DEFAULT_RESET_REFLECTION
        ),
    )


def latest_reset_sort() -> list:
    """Sort that puts the most recent reset first."""
    return [{"property": RESET_DATE, "direction": "descending"}]
