"""Routes for looking up representatives by zip code."""

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from talkto.services import reps_client
from talkto.services.representatives import (
    InvalidZipError,
    NoRepresentativesFound,
    RepresentativeLookupError,
)
from talkto.templating import templates

router = APIRouter(prefix="/reps", tags=["representatives"])


@router.get("")
async def find_representatives(
    request: Request,
    zip: str = Query(default="", description="5-digit US zip code"),
):
    """Find senators, house representatives and state officials for a zip.

    Returns the cards partial for HTMX requests, JSON for API calls.
    """
    status_code = 200
    error = None
    reps = None

    try:
        reps = await reps_client.find_by_zip(zip)
    except InvalidZipError as exc:
        error, status_code = str(exc), 400
    except NoRepresentativesFound as exc:
        error, status_code = str(exc), 404
    except RepresentativeLookupError as exc:
        error, status_code = str(exc), 500

    if request.headers.get("HX-Request"):
        # HTMX only swaps 2xx responses; the error is rendered inline instead.
        return templates.TemplateResponse(
            request,
            "partials/representatives.html",
            {"reps": reps, "error": error},
        )

    if error:
        return JSONResponse(content={"error": error}, status_code=status_code)

    return JSONResponse(content={"zip": zip.strip(), **reps.to_dict()})
