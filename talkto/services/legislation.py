"""Legislative activity by category.

Bill titles are matched against an ordered keyword table, first match wins.
Bills that match nothing fall into a catch-all that is never reported.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote

from talkto.models import CategoryActivity, TrendingCategory
from talkto.services.congress_api import CongressAPIClient, CongressAPIError, congress_client
from talkto.services.scoring import round_half_up, slugify, utc_timestamp

logger = logging.getLogger(__name__)

CATCH_ALL = "Legislation"
CATCH_ALL_ICON = "📜"
MAX_CATEGORIES = 6
SATURATION_COUNT = 10
SUBTITLE_LIMIT = 60
BILL_LIMIT = 50


@dataclass(frozen=True)
class CategoryRule:
    label: str
    icon: str
    keywords: tuple[str, ...]

    def matches(self, title_lower: str) -> bool:
        return any(keyword in title_lower for keyword in self.keywords)


CATEGORY_RULES: list[CategoryRule] = [
    CategoryRule("Government Funding", "💰", ("appropriation", "funding", "budget")),
    CategoryRule("Healthcare", "🏥", ("health", "medicare", "drug", "medical")),
    CategoryRule("Immigration", "🛂", ("immigra", "border", "visa")),
    CategoryRule("Climate & Energy", "🌍", ("climate", "energy", "environment", "emission")),
    CategoryRule("Education", "📚", ("education", "student", "school", "college")),
    CategoryRule("Defense & Veterans", "🎖️", ("veteran", "military", "defense", "armed forces")),
    CategoryRule("Taxes", "📊", ("tax", "revenue")),
    CategoryRule("Security & Privacy", "🔒", ("security", "cyber", "privacy")),
    CategoryRule("Housing", "🏠", ("housing", "rent", "mortgage")),
    CategoryRule("Infrastructure", "🚧", ("infrastructure", "transport", "highway", "rail")),
    CategoryRule("Social Security", "👴", ("social security", "retirement", "pension")),
    CategoryRule("Jobs & Labor", "💼", ("job", "employment", "labor", "worker", "wage")),
]


def categorize_by_title(title: Optional[str]) -> tuple[str, str]:
    """Return (category label, icon) for a bill title."""
    title_lower = (title or "").lower()
    for rule in CATEGORY_RULES:
        if rule.matches(title_lower):
            return rule.label, rule.icon
    return CATCH_ALL, CATCH_ALL_ICON


def intensity_for(count: int) -> int:
    """Normalize a bill count to 0-100; ten or more bills saturate."""
    return min(100, round_half_up(count / SATURATION_COUNT * 100))


def truncate_subtitle(text: str) -> str:
    if len(text) > SUBTITLE_LIMIT:
        return text[:SUBTITLE_LIMIT] + "..."
    return text


def search_url(label: str) -> str:
    return f"https://www.congress.gov/search?q={quote(label, safe='')}"


def tally_bills(bills: Iterable[dict]) -> dict[str, CategoryActivity]:
    """Group bills by category, in first-seen order."""
    activity: dict[str, CategoryActivity] = {}

    for bill in bills:
        label, icon = categorize_by_title(bill.get("title"))
        if label not in activity:
            activity[label] = CategoryActivity(label=label, icon=icon)

        latest_action = bill.get("latestAction") or {}
        activity[label].add_bill(
            f"{bill.get('type', '')}.{bill.get('number', '')}",
            latest_action.get("text"),
        )

    return activity


def rank_categories(activity: dict[str, CategoryActivity]) -> list[TrendingCategory]:
    """Finalize tallies into the top categories by bill count."""
    trending = [
        TrendingCategory(
            id=slugify(tally.label),
            title=tally.label,
            subtitle=truncate_subtitle(tally.recent_action),
            intensity=intensity_for(tally.count),
            icon=tally.icon,
            bill_count=tally.count,
            url=search_url(tally.label),
        )
        for tally in activity.values()
        if tally.label != CATCH_ALL
    ]
    trending.sort(key=lambda c: c.bill_count, reverse=True)
    return trending[:MAX_CATEGORIES]


class LegislativeActivityAggregator:
    """Ranks policy categories by recent bill activity on Congress.gov."""

    def __init__(self, client: Optional[CongressAPIClient] = None):
        self.client = client or congress_client

    async def get_trending(self) -> list[TrendingCategory]:
        """Fetch recent bills and return up to six ranked categories.

        Errors from the Congress.gov client propagate; there is no fallback.
        Bills with malformed fields raise CongressAPIError as well.
        """
        bills = await self.client.get_recent_bills(limit=BILL_LIMIT)
        try:
            return rank_categories(tally_bills(b for b in bills if isinstance(b, dict)))
        except (AttributeError, TypeError, KeyError) as exc:
            logger.error("Malformed bill in Congress.gov response: %s", exc)
            raise CongressAPIError("Malformed bill in Congress.gov response") from exc

    async def get_payload(self) -> dict:
        """JSON body for the trending endpoint."""
        trending = await self.get_trending()
        return {
            "trending": [c.to_dict() for c in trending],
            "updated": utc_timestamp(),
        }


legislative_aggregator = LegislativeActivityAggregator()
