"""Display helpers used by the page templates."""

import json
import re
from datetime import datetime
from typing import Optional
from urllib.parse import quote, urlparse

from talkto.models import TrendingCategory
from talkto.services.scoring import slugify

CURRENT_CONGRESS = "119"

_NON_DIGITS = re.compile(r"\D")

# (substring, badge class, display name), first match wins
PARTIES = [
    ("democrat", "badge-democrat", "Democrat"),
    ("republican", "badge-republican", "Republican"),
    ("independent", "badge-independent", "Independent"),
    ("libertarian", None, "Libertarian"),
    ("green", None, "Green"),
]


def party_badge_class(party: str) -> str:
    party_lower = (party or "").lower()
    for needle, badge, _ in PARTIES:
        if badge and needle in party_lower:
            return badge
    return "badge-neutral"


def full_party_name(party: str) -> str:
    party_lower = (party or "").lower()
    for needle, _, name in PARTIES:
        if needle in party_lower:
            return name
    return party or "Unknown"


def phone_digits(phone: str) -> str:
    return _NON_DIGITS.sub("", phone or "")


def format_phone(phone: str) -> str:
    """Format 10-digit (or 1-prefixed 11-digit) US numbers as (XXX) XXX-XXXX."""
    digits = phone_digits(phone)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    elif len(digits) != 10:
        return phone
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def contact_url(website_url: str) -> str:
    """Point congressional websites at their contact form."""
    try:
        hostname = urlparse(website_url).hostname or ""
    except ValueError:
        return website_url
    if hostname.endswith(".senate.gov") or hostname.endswith(".house.gov"):
        return website_url.rstrip("/") + "/contact"
    return website_url


def congress_intensity_color(intensity: int) -> str:
    if intensity >= 80:
        return "bg-red-500"
    if intensity >= 60:
        return "bg-orange-500"
    if intensity >= 40:
        return "bg-amber-500"
    return "bg-emerald-500"


def public_intensity_color(intensity: int) -> str:
    if intensity >= 80:
        return "bg-rose-500"
    if intensity >= 60:
        return "bg-pink-500"
    if intensity >= 40:
        return "bg-fuchsia-500"
    return "bg-purple-500"


def congress_search_url(category: str) -> str:
    """Search link scoped to the current Congress's legislation."""
    query = json.dumps(
        {"source": "legislation", "congress": CURRENT_CONGRESS, "search": category},
        separators=(",", ":"),
    )
    return f"https://www.congress.gov/search?q={quote(query, safe='')}"


def updated_date(timestamp: Optional[str]) -> str:
    """Render an ISO timestamp as a short date, or empty when missing."""
    if not timestamp:
        return ""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return ""
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def _fallback_issue(label: str, subtitle: str, intensity: int, icon: str, count: int, search: str) -> TrendingCategory:
    return TrendingCategory(
        id=slugify(label),
        title=label,
        subtitle=subtitle,
        intensity=intensity,
        icon=icon,
        bill_count=count,
        url=congress_search_url(search),
    )


# Shown in the "Active in Congress" panel when live data is unavailable.
FALLBACK_ISSUES: list[TrendingCategory] = [
    _fallback_issue("Government Funding", "Appropriations activity", 85, "💰", 8, "appropriations"),
    _fallback_issue("Healthcare", "Healthcare legislation", 70, "🏥", 6, "healthcare"),
    _fallback_issue("Defense & Veterans", "Military and veterans affairs", 60, "🎖️", 5, "veterans"),
    _fallback_issue("Climate & Energy", "Environmental policy", 55, "🌍", 4, "climate"),
    _fallback_issue("Education", "Education policy", 45, "📚", 3, "education"),
    _fallback_issue("Immigration", "Border and immigration", 40, "🛂", 3, "immigration"),
]
