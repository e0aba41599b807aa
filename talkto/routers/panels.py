"""HTML partials for the two trend panels on the home page."""

import logging

from fastapi import APIRouter, Request

from talkto.services import legislative_aggregator, public_trends_aggregator
from talkto.services.congress_api import CongressAPIError
from talkto.services.formatting import FALLBACK_ISSUES, congress_search_url
from talkto.services.scoring import utc_timestamp
from talkto.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/panels", tags=["panels"])


@router.get("/public-concerns")
async def public_concerns_panel(request: Request):
    """What people are searching for."""
    trends, source = await public_trends_aggregator.get_trends()
    return templates.TemplateResponse(
        request,
        "partials/public_concerns.html",
        {"topics": trends, "source": source},
    )


@router.get("/congress")
async def congress_panel(request: Request):
    """What Congress is working on, with a curated list if the API is down."""
    issues = []
    updated = None
    try:
        categories = await legislative_aggregator.get_trending()
    except CongressAPIError as exc:
        logger.error("Failed to fetch trending issues: %s", exc)
    else:
        issues = [
            {**c.to_dict(), "url": congress_search_url(c.title)} for c in categories
        ]
        if issues:
            updated = utc_timestamp()

    if not issues:
        issues = [c.to_dict() for c in FALLBACK_ISSUES]

    return templates.TemplateResponse(
        request,
        "partials/congress.html",
        {"issues": issues, "updated": updated},
    )
