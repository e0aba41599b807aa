"""HTTP cache hints for the JSON endpoints.

TTL values are defined in hours for each data type:
- Legislation: 1 hour (Congress.gov bill listings update throughout the day)
- Public trends: not cached downstream; the live/curated split must stay visible
"""

from datetime import timedelta
from enum import Enum
from typing import Optional


class CacheTTL(Enum):
    """Cache TTL values in hours for different data types."""

    LEGISLATION = 1
    PUBLIC_TRENDS = 0


def get_ttl_timedelta(ttl: CacheTTL) -> timedelta:
    """Get timedelta for a cache TTL value."""
    return timedelta(hours=ttl.value)


def cache_control_header(ttl: CacheTTL) -> Optional[str]:
    """Build a Cache-Control value, or None when the data must not be cached.

    Args:
        ttl: CacheTTL enum value for the response's data type

    Returns:
        Header value such as ``"public, max-age=3600"``
    """
    seconds = int(get_ttl_timedelta(ttl).total_seconds())
    if seconds <= 0:
        return None
    return f"public, max-age={seconds}"
