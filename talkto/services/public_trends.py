"""Public search-interest aggregation over Google Trends.

Queries interest-over-time for a fixed list of civic topics, averages each
series into a 0-100 score and ranks the topics. Falls back to a curated list
whenever too few topics could be scored.
"""

import asyncio
import logging
from typing import Callable, Optional
from urllib.parse import quote

from pytrends.request import TrendReq

from talkto.config import get_settings
from talkto.models import CivicTopic, TopicScore
from talkto.services.outcome import settle, successes
from talkto.services.scoring import round_half_up, slugify, utc_timestamp

logger = logging.getLogger(__name__)
settings = get_settings()

SOURCE_LIVE = "Google Trends"
SOURCE_CURATED = "Curated"

DEFAULT_INTEREST = 50
MAX_TOPICS = 6
MIN_LIVE_TOPICS = 4
TIMEFRAME = "now 7-d"

CIVIC_TOPICS: list[CivicTopic] = [
    CivicTopic("Immigration", "🛂"),
    CivicTopic("Economy inflation", "💰"),
    CivicTopic("Healthcare costs", "🏥"),
    CivicTopic("Climate change", "🌍"),
    CivicTopic("Education policy", "📚"),
    CivicTopic("Housing crisis", "🏠"),
    CivicTopic("Gun control", "🚨"),
    CivicTopic("Social Security", "👴"),
    CivicTopic("Student loans", "🎓"),
    CivicTopic("Minimum wage", "💼"),
]

_EXPLORE = settings.google_trends_explore_url

FALLBACK_TRENDS: list[TopicScore] = [
    TopicScore("economy", "Economy", "High", 82, "💰", f"{_EXPLORE}?q=economy%20inflation&geo=US"),
    TopicScore("immigration", "Immigration", "High", 78, "🛂", f"{_EXPLORE}?q=immigration&geo=US"),
    TopicScore("healthcare", "Healthcare", "High", 71, "🏥", f"{_EXPLORE}?q=healthcare%20costs&geo=US"),
    TopicScore("housing", "Housing", "Medium", 64, "🏠", f"{_EXPLORE}?q=housing%20crisis&geo=US"),
    TopicScore("education", "Education", "Medium", 55, "📚", f"{_EXPLORE}?q=education%20policy&geo=US"),
    TopicScore("climate", "Climate", "Medium", 48, "🌍", f"{_EXPLORE}?q=climate%20change&geo=US"),
]

SeriesFetcher = Callable[[str, str], list[int]]


def fetch_interest_series(term: str, geo: str) -> list[int]:
    """Fetch the raw 7-day interest series for one search term.

    Blocking; run it in a worker thread from async code.
    """
    pytrends = TrendReq(hl="en-US", tz=360)
    pytrends.build_payload([term], timeframe=TIMEFRAME, geo=geo)
    frame = pytrends.interest_over_time()
    if frame.empty or term not in frame.columns:
        return []
    return [int(value) for value in frame[term].tolist()]


def volume_label(score: int) -> str:
    """Map a 0-100 score to the coarse search-volume label."""
    if score >= 70:
        return "High"
    if score >= 40:
        return "Medium"
    return "Low"


def average_interest(values: list[int]) -> int:
    """Mean of the series, rounded; neutral when the series is empty."""
    if not values:
        return DEFAULT_INTEREST
    return round_half_up(sum(values) / len(values))


def explore_url(term: str, geo: str = "US") -> str:
    return f"{_EXPLORE}?q={quote(term, safe='')}&geo={geo}&date=now%207-d"


def build_topic_score(topic: CivicTopic, interest: int, geo: str = "US") -> TopicScore:
    return TopicScore(
        id=slugify(topic.term),
        title=topic.term.split(" ")[0],
        search_volume=volume_label(interest),
        intensity=interest,
        icon=topic.icon,
        url=explore_url(topic.term, geo),
    )


class PublicTrendsAggregator:
    """Ranks civic topics by current public search interest."""

    def __init__(
        self,
        topics: Optional[list[CivicTopic]] = None,
        fetch_series: Optional[SeriesFetcher] = None,
    ):
        self.topics = topics if topics is not None else CIVIC_TOPICS
        self.geo = settings.trends_geo
        self._fetch_series = fetch_series or fetch_interest_series

    async def get_interest(self, term: str) -> int:
        """Average interest for a term, or the neutral default on any failure."""
        try:
            values = await asyncio.to_thread(self._fetch_series, term, self.geo)
            return average_interest(values)
        except Exception as exc:
            logger.warning("Google Trends query failed for %r: %s", term, exc)
            return DEFAULT_INTEREST

    async def score_topic(self, topic: CivicTopic) -> TopicScore:
        interest = await self.get_interest(topic.term)
        return build_topic_score(topic, interest, self.geo)

    async def get_trends(self) -> tuple[list[TopicScore], str]:
        """Return up to six ranked topics and the name of their source.

        Only the first six configured topics are queried. If fewer than four
        of them produce a score, the curated fallback list is returned.
        """
        candidates = self.topics[:MAX_TOPICS]
        outcomes = await settle(self.score_topic(t) for t in candidates)

        for outcome in outcomes:
            if not outcome.ok:
                logger.error("Dropping topic after unexpected error: %s", outcome.error)

        scored = sorted(successes(outcomes), key=lambda t: t.intensity, reverse=True)

        if len(scored) < MIN_LIVE_TOPICS:
            logger.error(
                "Not enough trend data (%d of %d topics); serving curated list",
                len(scored), len(candidates),
            )
            return list(FALLBACK_TRENDS), SOURCE_CURATED

        return scored[:MAX_TOPICS], SOURCE_LIVE

    async def get_payload(self) -> dict:
        """JSON body for the public-trends endpoint."""
        trends, source = await self.get_trends()
        return {
            "trends": [t.to_dict() for t in trends],
            "updated": utc_timestamp(),
            "source": source,
        }


public_trends_aggregator = PublicTrendsAggregator()
