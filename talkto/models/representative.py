"""Representative records returned by the lookup provider."""

from dataclasses import dataclass, field
from enum import Enum


class Bucket(str, Enum):
    """Display group an elected official is filed under."""

    SENATOR = "senator"
    HOUSE = "house"
    STATE = "state"


@dataclass(frozen=True)
class Representative:
    """A single officeholder as returned by the lookup API.

    Optional fields default to the empty string so classification never has
    to guard against missing values.
    """

    name: str = ""
    party: str = ""
    phone: str = ""
    url: str = ""
    photo_url: str = ""
    reason: str = ""
    area: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Representative":
        """Build from the provider's camelCase JSON, tolerating nulls."""
        return cls(
            name=data.get("name") or "",
            party=data.get("party") or "",
            phone=data.get("phone") or "",
            url=data.get("url") or "",
            photo_url=data.get("photoURL") or "",
            reason=data.get("reason") or "",
            area=data.get("area") or "",
        )


@dataclass(frozen=True)
class ClassifiedRepresentative:
    """A representative with its bucket and card title."""

    representative: Representative
    bucket: Bucket
    title: str

    def to_dict(self) -> dict:
        rep = self.representative
        return {
            "name": rep.name,
            "party": rep.party,
            "phone": rep.phone,
            "url": rep.url,
            "photoURL": rep.photo_url,
            "reason": rep.reason,
            "area": rep.area,
            "bucket": self.bucket.value,
            "title": self.title,
        }


@dataclass
class RepsByLevel:
    """Representatives grouped into the three display buckets."""

    senators: list[ClassifiedRepresentative] = field(default_factory=list)
    house_reps: list[ClassifiedRepresentative] = field(default_factory=list)
    state: list[ClassifiedRepresentative] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.senators) + len(self.house_reps) + len(self.state)

    def to_dict(self) -> dict:
        return {
            "senators": [r.to_dict() for r in self.senators],
            "house_reps": [r.to_dict() for r in self.house_reps],
            "state": [r.to_dict() for r in self.state],
        }
