"""JSON endpoints for the public-interest and legislative trend panels."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from talkto.services import legislative_aggregator, public_trends_aggregator
from talkto.services.cache_config import CacheTTL, cache_control_header
from talkto.services.congress_api import CongressAPIError, MissingAPIKeyError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["trends"])


def _with_cache_hint(response: JSONResponse, ttl: CacheTTL) -> JSONResponse:
    cache_control = cache_control_header(ttl)
    if cache_control:
        response.headers["Cache-Control"] = cache_control
    return response


@router.get("/public-trends")
async def public_trends() -> JSONResponse:
    """Civic topics ranked by Google Trends interest.

    Always answers 200; ``source`` says whether the data is live or curated.
    """
    payload = await public_trends_aggregator.get_payload()
    return _with_cache_hint(JSONResponse(content=payload), CacheTTL.PUBLIC_TRENDS)


@router.get("/trending")
async def trending() -> JSONResponse:
    """Policy categories ranked by recent bill activity on Congress.gov."""
    try:
        payload = await legislative_aggregator.get_payload()
    except MissingAPIKeyError as exc:
        logger.error("Trending issues unavailable: %s", exc)
        return JSONResponse(content={"error": str(exc)}, status_code=500)
    except CongressAPIError as exc:
        logger.error("Error fetching from Congress API: %s", exc)
        return JSONResponse(
            content={"error": "Failed to fetch trending issues"},
            status_code=500,
        )

    return _with_cache_hint(JSONResponse(content=payload), CacheTTL.LEGISLATION)
