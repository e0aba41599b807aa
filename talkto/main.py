"""FastAPI application entry point."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from talkto.config import get_settings
from talkto.middleware import RateLimitMiddleware
from talkto.routers import organizations, panels, representatives, trends
from talkto.routers.organizations import ISSUE_TILES
from talkto.services import get_directory
from talkto.templating import templates

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(
    title="Talkto",
    description="Find and contact your government representatives",
    version="0.1.0",
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Add rate limiting middleware
app.add_middleware(RateLimitMiddleware)

app.include_router(representatives.router)
app.include_router(organizations.router)
app.include_router(trends.router)
app.include_router(panels.router)


@app.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Homepage with the zip code form and organization finder."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"categories": get_directory().categories, "issue_tiles": ISSUE_TILES},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
