"""Organization directory keyed by issue and metro area.

Reference data ships as JSON under ``talkto/data`` and is loaded once.
Metro zip prefixes must be disjoint; overlapping prefixes are rejected at
load time so a prefix always resolves to a single metro.
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from talkto.models import IssueCategory, Metro, Organization

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class DirectoryDataError(ValueError):
    """Raised when reference data violates an invariant."""


@dataclass
class Directory:
    """Loaded organization reference data."""

    categories: list[IssueCategory] = field(default_factory=list)
    metros: list[Metro] = field(default_factory=list)
    local_orgs: dict[tuple[str, str], list[Organization]] = field(default_factory=dict)

    def get_category(self, category_id: str) -> Optional[IssueCategory]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def get_metro_from_zip(self, zip_code: Optional[str]) -> Optional[Metro]:
        """Resolve a zip code to its metro by the first three digits."""
        if not zip_code or len(zip_code) < 3:
            return None
        prefix = zip_code[:3]
        for metro in self.metros:
            if prefix in metro.zip_prefixes:
                return metro
        return None

    def get_local_orgs(self, metro_id: str, category_id: str) -> list[Organization]:
        return list(self.local_orgs.get((metro_id, category_id), []))


def _check_disjoint(metros: list[Metro]) -> None:
    owners: dict[str, str] = {}
    for metro in metros:
        for prefix in metro.zip_prefixes:
            if prefix in owners:
                raise DirectoryDataError(
                    f"Zip prefix {prefix} claimed by both {owners[prefix]} and {metro.id}"
                )
            owners[prefix] = metro.id


def build_directory(organizations: dict, local: dict) -> Directory:
    """Build a Directory from the two raw JSON documents."""
    categories = [
        IssueCategory(
            id=c["id"],
            name=c["name"],
            organizations=tuple(Organization.from_json(o) for o in c.get("organizations", [])),
        )
        for c in organizations.get("categories", [])
    ]

    metros = [
        Metro(id=metro_id, name=m["name"], zip_prefixes=frozenset(m.get("zipPrefixes", [])))
        for metro_id, m in local.get("metros", {}).items()
    ]
    _check_disjoint(metros)

    local_orgs: dict[tuple[str, str], list[Organization]] = {}
    for entry in local.get("localOrgs", []):
        key = (entry["metro"], entry["category"])
        # First entry for a (metro, category) pair wins.
        if key not in local_orgs:
            local_orgs[key] = [Organization.from_json(o) for o in entry.get("organizations", [])]

    return Directory(categories=categories, metros=metros, local_orgs=local_orgs)


def load_directory(data_dir: Path = DATA_DIR) -> Directory:
    with open(data_dir / "organizations.json", encoding="utf-8") as fh:
        organizations = json.load(fh)
    with open(data_dir / "local_organizations.json", encoding="utf-8") as fh:
        local = json.load(fh)
    return build_directory(organizations, local)


@lru_cache
def get_directory() -> Directory:
    """Get the cached directory loaded from the bundled data files."""
    return load_directory()


def search_more_url(category_name: str, zip_code: Optional[str] = None) -> str:
    """Google search link for more organizations near the user."""
    near = f" near {zip_code}" if zip_code else " near me"
    return "https://www.google.com/search?q=" + quote(
        f"{category_name} nonprofit organizations{near}", safe=""
    )
