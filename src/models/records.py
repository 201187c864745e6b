"""Flat, caller-facing records built from Notion pages."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass
class SubscriptionRecord:
    """A subscription row as returned by ``GET /subscriptions``."""
    id: str
    name: str
    amount: Union[int, float] = 0
    whatsapp: Optional[str] = None
    renewal_date: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "amount": self.amount,
            "whatsapp": self.whatsapp,
            "renewalDate": self.renewal_date,
        }


@dataclass
class TaskRecord:
    title: str

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title}


@dataclass
class DailyResetRecord:
    """The most recent daily reset entry."""
    id: str
    title: str
    biggest_win: str
    reflection: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "biggestWin": self.biggest_win,
            "reflection": self.reflection,
        }
