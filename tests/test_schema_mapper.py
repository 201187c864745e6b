"""Tests for the schema mapper and property variants."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from errors import ValidationFailed
from mapping import (
    build_subscription_update,
    build_task_properties,
    build_archive_reason,
    subscription_from_page,
    daily_reset_from_page,
)
from models import (
    TitleProperty,
    RichTextProperty,
    DateProperty,
    NumberProperty,
    CheckboxProperty,
    serialize_properties,
    TaskRecord,
)


class TestOutboundMapping:
    """Test update -> Notion property mapping."""

    def test_all_recognized_keys(self):
        properties = build_subscription_update({
            "name": "Spotify",
            "whatsapp": "+33612345678",
            "renewalDate": "2025-01-31",
        })

        assert properties == {
            "Nom": TitleProperty("Spotify"),
            "WhatsApp": RichTextProperty("+33612345678"),
            "Renewal Date": DateProperty("2025-01-31"),
        }
        assert list(properties) == ["Nom", "WhatsApp", "Renewal Date"]

    def test_unknown_keys_are_dropped(self):
        properties = build_subscription_update({"name": "X", "amount": 12, "id": "abc"})

        assert properties == {"Nom": TitleProperty("X")}

    def test_empty_name_is_still_written(self):
        properties = build_subscription_update({"name": ""})

        assert serialize_properties(properties) == {"Nom": {"title": []}}

    def test_null_values_count_as_absent(self):
        with pytest.raises(ValidationFailed) as exc_info:
            build_subscription_update({"name": None, "whatsapp": None})

        assert exc_info.value.message == "No valid properties provided for update."
        assert exc_info.value.status_code == 400

    def test_empty_updates_rejected(self):
        with pytest.raises(ValidationFailed):
            build_subscription_update({})

    def test_numeric_whatsapp_becomes_text(self):
        properties = build_subscription_update({"whatsapp": 33612345678})

        assert properties == {"WhatsApp": RichTextProperty("33612345678")}

    def test_nested_value_rejected(self):
        with pytest.raises(ValidationFailed):
            build_subscription_update({"name": {"first": "X"}})

    @pytest.mark.parametrize("updates", [
        {"name": True},
        {"whatsapp": False},
        {"renewalDate": False},
        {"renewalDate": 20250131},
        {"name": "X", "renewalDate": True},
    ])
    def test_non_text_values_rejected(self, updates):
        with pytest.raises(ValidationFailed) as exc_info:
            build_subscription_update(updates)

        assert exc_info.value.message.startswith("Invalid value for '")
        assert exc_info.value.status_code == 400

    def test_empty_renewal_date_rejected(self):
        with pytest.raises(ValidationFailed):
            build_subscription_update({"renewalDate": ""})

    def test_task_properties(self):
        assert serialize_properties(build_task_properties(TaskRecord("Buy milk"))) == {
            "Title": {"title": [{"type": "text", "text": {"content": "Buy milk"}}]}
        }

    def test_archive_reason_needs_target_property(self):
        assert build_archive_reason(None, "Too expensive") == {}
        assert build_archive_reason("Archive Reason", "Too expensive") == {
            "Archive Reason": RichTextProperty("Too expensive")
        }


class TestPropertyVariants:
    """Test that each variant renders the Notion shape for its type."""

    def test_payload_shapes(self):
        assert DateProperty("2025-01-01", end="2025-02-01").to_notion() == {
            "date": {"start": "2025-01-01", "end": "2025-02-01"}
        }
        assert NumberProperty(9.5).to_notion() == {"number": 9.5}
        assert NumberProperty(None).to_notion() == {"number": None}
        assert CheckboxProperty(True).to_notion() == {"checkbox": True}

    @pytest.mark.parametrize("build", [
        lambda: TitleProperty(12),
        lambda: RichTextProperty(None),
        lambda: DateProperty(""),
        lambda: NumberProperty("12"),
        lambda: NumberProperty(True),
        lambda: CheckboxProperty("yes"),
    ])
    def test_wrong_value_type_fails_at_construction(self, build):
        with pytest.raises(ValueError):
            build()


class TestInboundMapping:
    """Test Notion page -> flat record mapping."""

    def test_subscription_full(self):
        page = {
            "id": "sub-1",
            "properties": {
                "Nom": {"type": "title", "title": [{"plain_text": "Netflix"}, {"plain_text": " extra"}]},
                "Montant": {"type": "number", "number": 13.49},
                "WhatsApp": {"type": "rich_text", "rich_text": [{"plain_text": "+33600000000"}]},
                "Renewal Date": {"type": "date", "date": {"start": "2025-06-01", "end": None}},
            }
        }

        record = subscription_from_page(page).to_dict()

        assert record == {
            "id": "sub-1",
            "name": "Netflix",
            "amount": 13.49,
            "whatsapp": "+33600000000",
            "renewalDate": "2025-06-01",
        }

    @pytest.mark.parametrize("properties", [
        {},
        {"Nom": {"title": []}, "Montant": {"number": None}},
        {"Nom": None, "Montant": None},
        {"Nom": {"title": None}, "Montant": {"number": "ten"}},
        {"Nom": {"title": [{"plain_text": ""}]}},
    ])
    def test_subscription_defaults(self, properties):
        record = subscription_from_page({"id": "sub-2", "properties": properties})

        assert record.name == "Unnamed"
        assert record.amount == 0
        assert record.whatsapp is None
        assert record.renewal_date is None

    def test_subscription_without_properties(self):
        record = subscription_from_page({"id": "sub-3"})

        assert record.name == "Unnamed"
        assert record.amount == 0

    def test_fragment_text_content_fallback(self):
        page = {"id": "sub-4", "properties": {"Nom": {"title": [{"text": {"content": "Disney+"}}]}}}

        assert subscription_from_page(page).name == "Disney+"

    def test_daily_reset(self):
        page = {
            "id": "reset-1",
            "properties": {
                "Name": {"title": [{"plain_text": "Week 12"}]},
                "Biggest Win": {"rich_text": [{"plain_text": "Ran 10k"}]},
                "Reflection": {"rich_text": [{"plain_text": "Sleep more"}]},
            }
        }

        assert daily_reset_from_page(page).to_dict() == {
            "id": "reset-1",
            "title": "Week 12",
            "biggestWin": "Ran 10k",
            "reflection": "Sleep more",
        }

    def test_daily_reset_defaults(self):
        record = daily_reset_from_page({"id": "reset-2", "properties": {"Biggest Win": {"rich_text": []}}})

        assert record.title == "Untitled Reset"
        assert record.biggest_win == "Not specified."
        assert record.reflection == "No reflection recorded."
