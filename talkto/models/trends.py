"""Public search-interest topics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CivicTopic:
    """A search term tracked on Google Trends."""

    term: str
    icon: str


@dataclass(frozen=True)
class TopicScore:
    """Ranked interest for one civic topic.

    Attributes:
        id: Slug derived from the search term.
        title: Short display title.
        search_volume: Coarse label, "High", "Medium" or "Low".
        intensity: Interest score on the 0-100 Trends scale.
        icon: Emoji shown beside the title.
        url: Google Trends explore link for the term.
    """

    id: str
    title: str
    search_volume: str
    intensity: int
    icon: str
    url: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "searchVolume": self.search_volume,
            "intensity": self.intensity,
            "icon": self.icon,
            "url": self.url,
        }
