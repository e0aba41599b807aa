"""Small numeric and text helpers shared by the aggregators."""

import math
import re
from datetime import datetime, timezone

_WHITESPACE = re.compile(r"\s+")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def slugify(label: str) -> str:
    """Lower-case a label and replace whitespace runs with hyphens."""
    return _WHITESPACE.sub("-", label.lower())


def utc_timestamp(now: datetime = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )
