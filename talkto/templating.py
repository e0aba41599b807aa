"""Shared Jinja2 environment with display filters."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from talkto.services import formatting

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

templates.env.filters.update(
    party_badge=formatting.party_badge_class,
    party_name=formatting.full_party_name,
    phone_display=formatting.format_phone,
    phone_digits=formatting.phone_digits,
    contact_url=formatting.contact_url,
    congress_color=formatting.congress_intensity_color,
    public_color=formatting.public_intensity_color,
    updated_date=formatting.updated_date,
)
