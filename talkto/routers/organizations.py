"""Routes for the organization directory."""

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from talkto.services import get_directory
from talkto.services.directory import search_more_url
from talkto.templating import templates

router = APIRouter(prefix="/organizations", tags=["organizations"])

ISSUE_TILES = [
    {"id": "environment", "icon": "🌍", "label": "Environment"},
    {"id": "voting-rights", "icon": "🗳️", "label": "Voting Rights"},
    {"id": "civil-rights", "icon": "✊", "label": "Civil Rights"},
    {"id": "healthcare", "icon": "🏥", "label": "Healthcare"},
    {"id": "education", "icon": "📚", "label": "Education"},
    {"id": "housing", "icon": "🏠", "label": "Housing"},
]


@router.get("/categories")
async def list_categories() -> JSONResponse:
    """Issue categories available in the directory, plus the quick-pick tiles."""
    directory = get_directory()
    return JSONResponse(content={
        "categories": [{"id": c.id, "name": c.name} for c in directory.categories],
        "popular": ISSUE_TILES,
    })


@router.get("")
async def find_organizations(
    request: Request,
    category: str = Query(..., min_length=1, description="Issue category id"),
    zip: str = Query(default="", description="Zip code used to localize results"),
):
    """National and metro-local organizations working on an issue."""
    directory = get_directory()
    selected = directory.get_category(category)
    zip_code = zip.strip()

    if selected is None:
        return JSONResponse(content={"error": "Unknown issue category"}, status_code=404)

    metro = directory.get_metro_from_zip(zip_code)
    local_orgs = directory.get_local_orgs(metro.id, selected.id) if metro else []
    more_url = search_more_url(selected.name, zip_code or None)

    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(
            request,
            "partials/organizations.html",
            {
                "category": selected,
                "metro": metro,
                "local_orgs": local_orgs,
                "search_url": more_url,
            },
        )

    return JSONResponse(content={
        "category": {"id": selected.id, "name": selected.name},
        "metro": metro.to_dict() if metro else None,
        "local_organizations": [o.to_dict() for o in local_orgs],
        "organizations": [o.to_dict() for o in selected.organizations],
        "search_url": more_url,
    })
