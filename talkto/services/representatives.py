"""Representative lookup by zip code and bucket classification.

Classification is an ordered rule table evaluated first-match-wins over the
lower-cased ``reason`` and ``area`` fields. A record that matches no rule is
filed under state officials as long as it has a name.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import httpx

from talkto.config import get_settings
from talkto.models import Bucket, ClassifiedRepresentative, Representative, RepsByLevel

logger = logging.getLogger(__name__)
settings = get_settings()

INVALID_ZIP_MESSAGE = "Please enter a valid 5-digit zip code"
NOT_FOUND_MESSAGE = "No representatives found for this zip code"
LOOKUP_FAILED_MESSAGE = "Unable to find representatives. Please try again."

_ZIP_PATTERN = re.compile(r"^\d{5}$")


class InvalidZipError(ValueError):
    """Raised before any network call when a zip code is malformed."""

    def __init__(self, message: str = INVALID_ZIP_MESSAGE):
        super().__init__(message)


class RepresentativeLookupError(Exception):
    """Raised when the lookup provider is unavailable or returns nothing."""


class NoRepresentativesFound(RepresentativeLookupError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class BucketRule:
    """One row of the classification table."""

    bucket: Bucket
    predicate: Callable[[str, str], bool]


def _contains_any(text: str, *needles: str) -> bool:
    return any(needle in text for needle in needles)


BUCKET_RULES: list[BucketRule] = [
    BucketRule(
        Bucket.SENATOR,
        lambda reason, area: _contains_any(reason, "senator", "senate")
        or "us senate" in area,
    ),
    BucketRule(
        Bucket.HOUSE,
        lambda reason, area: _contains_any(reason, "house", "representative")
        or "us house" in area,
    ),
    BucketRule(
        Bucket.STATE,
        lambda reason, area: "governor" in reason or "governor" in area,
    ),
]

# Title matching looks at the reason only; area is the fallback text.
TITLE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("senator", "senate"), "US Senator"),
    (("house", "representative"), "US Representative"),
    (("governor",), "Governor"),
]

BUCKET_TITLES = {
    Bucket.SENATOR: "US Senator",
    Bucket.HOUSE: "US Representative",
}


def classify_bucket(rep: Representative) -> Optional[Bucket]:
    """Return the bucket for a representative, or None if it is dropped."""
    reason = rep.reason.lower()
    area = rep.area.lower()

    for rule in BUCKET_RULES:
        if rule.predicate(reason, area):
            return rule.bucket

    if rep.name:
        return Bucket.STATE
    return None


def title_for(rep: Representative) -> str:
    """Derive a display title from the representative's stated role."""
    reason = rep.reason.lower()
    for needles, title in TITLE_RULES:
        if _contains_any(reason, *needles):
            return title
    return rep.area or "Representative"


def categorize_reps(reps: Iterable[Representative]) -> RepsByLevel:
    """Partition representatives into senators, house reps and state officials.

    Input order is preserved within each bucket.
    """
    grouped = RepsByLevel()
    targets = {
        Bucket.SENATOR: grouped.senators,
        Bucket.HOUSE: grouped.house_reps,
        Bucket.STATE: grouped.state,
    }

    for rep in reps:
        bucket = classify_bucket(rep)
        if bucket is None:
            continue
        title = BUCKET_TITLES.get(bucket) or title_for(rep)
        targets[bucket].append(ClassifiedRepresentative(rep, bucket, title))

    return grouped


def validate_zip(zip_code: Optional[str]) -> str:
    """Return the cleaned zip code or raise InvalidZipError."""
    clean = (zip_code or "").strip()
    if not _ZIP_PATTERN.match(clean):
        raise InvalidZipError()
    return clean


class RepresentativesClient:
    """Client for the 5 Calls representatives API."""

    def __init__(self):
        self.base_url = settings.reps_api_base_url

    async def lookup(self, zip_code: str) -> list[Representative]:
        """Fetch representatives for a zip code.

        Raises:
            InvalidZipError: if the zip is not exactly five digits.
            NoRepresentativesFound: if the provider returned an empty list.
            RepresentativeLookupError: on network errors or non-2xx status.
        """
        clean_zip = validate_zip(zip_code)

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/reps",
                    params={"location": clean_zip},
                    timeout=30.0,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Representative lookup failed for %s: %s", clean_zip, exc)
            raise RepresentativeLookupError(LOOKUP_FAILED_MESSAGE) from exc

        records = data.get("representatives") if isinstance(data, dict) else None
        if not records:
            raise NoRepresentativesFound()

        return [Representative.from_api(r) for r in records if isinstance(r, dict)]

    async def find_by_zip(self, zip_code: str) -> RepsByLevel:
        """Look up and classify representatives for a zip code."""
        return categorize_reps(await self.lookup(zip_code))


reps_client = RepresentativesClient()
