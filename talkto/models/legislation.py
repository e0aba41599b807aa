"""Legislative activity grouped by policy category."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CategoryActivity:
    """Running tally of recent bills matched to one category."""

    label: str
    icon: str
    count: int = 0
    bills: list[str] = field(default_factory=list)
    recent_action: str = ""

    def add_bill(self, bill_id: str, action_text: Optional[str]) -> None:
        """Count a bill, keeping the first non-empty action text seen."""
        self.count += 1
        self.bills.append(bill_id)
        if action_text and not self.recent_action:
            self.recent_action = action_text


@dataclass(frozen=True)
class TrendingCategory:
    """A finalized, ranked category of legislative activity."""

    id: str
    title: str
    subtitle: str
    intensity: int
    icon: str
    bill_count: int
    url: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "intensity": self.intensity,
            "icon": self.icon,
            "billCount": self.bill_count,
            "url": self.url,
        }
