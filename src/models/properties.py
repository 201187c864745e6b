"""Typed Notion property values.

Each variant knows the single payload shape Notion expects for its type, so
a caller cannot build a malformed property by hand.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


def _text_fragments(content: str) -> list:
    # An empty string clears the property
    if content == "":
        return []
    return [{"type": "text", "text": {"content": content}}]


@dataclass(frozen=True)
class TitleProperty:
    content: str
    type: str = "title"

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise ValueError("title content must be a string")

    def to_notion(self) -> Dict[str, Any]:
        return {"title": _text_fragments(self.content)}


@dataclass(frozen=True)
class RichTextProperty:
    content: str
    type: str = "rich_text"

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise ValueError("rich_text content must be a string")

    def to_notion(self) -> Dict[str, Any]:
        return {"rich_text": _text_fragments(self.content)}


@dataclass(frozen=True)
class DateProperty:
    start: str
    end: Optional[str] = None
    type: str = "date"

    def __post_init__(self):
        if not isinstance(self.start, str) or not self.start:
            raise ValueError("date start must be a non-empty string")

    def to_notion(self) -> Dict[str, Any]:
        date = {"start": self.start}
        if self.end:
            date["end"] = self.end
        return {"date": date}


@dataclass(frozen=True)
class NumberProperty:
    value: Optional[float]
    type: str = "number"

    def __post_init__(self):
        if self.value is not None and (
            isinstance(self.value, bool) or not isinstance(self.value, (int, float))
        ):
            raise ValueError("number value must be numeric")

    def to_notion(self) -> Dict[str, Any]:
        return {"number": self.value}


@dataclass(frozen=True)
class CheckboxProperty:
    checked: bool
    type: str = "checkbox"

    def __post_init__(self):
        if not isinstance(self.checked, bool):
            raise ValueError("checkbox value must be a boolean")

    def to_notion(self) -> Dict[str, Any]:
        return {"checkbox": self.checked}


PropertyValue = Union[
    TitleProperty,
    RichTextProperty,
    DateProperty,
    NumberProperty,
    CheckboxProperty,
]


def serialize_properties(properties: Dict[str, PropertyValue]) -> Dict[str, Dict[str, Any]]:
    """Render a name -> variant mapping into a Notion ``properties`` payload."""
    return {name: prop.to_notion() for name, prop in properties.items()}
