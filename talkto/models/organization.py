"""Static reference data for the organization directory."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Organization:
    """An advocacy organization or non-profit."""

    name: str
    mission: str
    website: str
    has_local_chapters: bool = False
    chapter_finder_url: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "Organization":
        return cls(
            name=data["name"],
            mission=data.get("mission", ""),
            website=data.get("website", ""),
            has_local_chapters=bool(data.get("hasLocalChapters", False)),
            chapter_finder_url=data.get("chapterFinderUrl"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "mission": self.mission,
            "website": self.website,
            "hasLocalChapters": self.has_local_chapters,
            "chapterFinderUrl": self.chapter_finder_url,
        }


@dataclass(frozen=True)
class IssueCategory:
    """An issue with its list of national organizations."""

    id: str
    name: str
    organizations: tuple[Organization, ...] = ()


@dataclass(frozen=True)
class Metro:
    """A metropolitan area and the 3-digit zip prefixes it covers."""

    id: str
    name: str
    zip_prefixes: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
