"""Record and property models for the Zion gateway."""

from .properties import (
    TitleProperty,
    RichTextProperty,
    DateProperty,
    NumberProperty,
    CheckboxProperty,
    PropertyValue,
    serialize_properties,
)
from .records import SubscriptionRecord, TaskRecord, DailyResetRecord

__all__ = [
    "TitleProperty",
    "RichTextProperty",
    "DateProperty",
    "NumberProperty",
    "CheckboxProperty",
    "PropertyValue",
    "serialize_properties",
    "SubscriptionRecord",
    "TaskRecord",
    "DailyResetRecord"
]
