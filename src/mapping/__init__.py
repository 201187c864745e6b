"""Schema mapping between gateway fields and Notion properties."""

from .schema_mapper import (
    build_subscription_update,
    build_task_properties,
    build_archive_reason,
    subscription_from_page,
    daily_reset_from_page,
    latest_reset_sort,
)

__all__ = [
    "build_subscription_update",
    "build_task_properties",
    "build_archive_reason",
    "subscription_from_page",
    "daily_reset_from_page",
    "latest_reset_sort"
]
