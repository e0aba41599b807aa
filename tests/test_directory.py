"""Unit tests for the organization directory."""

import pytest

from talkto.services.directory import (
    DirectoryDataError,
    build_directory,
    get_directory,
    search_more_url,
)

ORGS = {
    "categories": [
        {
            "id": "housing",
            "name": "Housing",
            "organizations": [
                {"name": "Habitat", "mission": "Homes", "website": "https://habitat.org",
                 "hasLocalChapters": True, "chapterFinderUrl": "https://habitat.org/local"},
            ],
        }
    ]
}

LOCAL = {
    "metros": {
        "los-angeles": {"name": "Los Angeles", "zipPrefixes": ["900", "902"]},
        "chicago": {"name": "Chicago", "zipPrefixes": ["606"]},
    },
    "localOrgs": [
        {"metro": "los-angeles", "category": "housing",
         "organizations": [{"name": "LA Family Housing", "mission": "m", "website": "https://lafh.org"}]},
    ],
}


@pytest.fixture
def directory():
    return build_directory(ORGS, LOCAL)


class TestMetroLookup:
    def test_prefix_resolves_to_metro(self, directory):
        metro = directory.get_metro_from_zip("90210")
        assert metro.id == "los-angeles"
        assert "902" in metro.zip_prefixes

    def test_three_digit_prefix_is_enough(self, directory):
        assert directory.get_metro_from_zip("902").name == "Los Angeles"

    def test_absent_prefix_has_no_metro(self, directory):
        assert directory.get_metro_from_zip("59001") is None

    def test_short_zip_has_no_metro(self, directory):
        assert directory.get_metro_from_zip("90") is None
        assert directory.get_metro_from_zip("") is None
        assert directory.get_metro_from_zip(None) is None

    def test_overlapping_prefixes_rejected(self):
        local = {
            "metros": {
                "a": {"name": "A", "zipPrefixes": ["902"]},
                "b": {"name": "B", "zipPrefixes": ["902"]},
            },
            "localOrgs": [],
        }
        with pytest.raises(DirectoryDataError):
            build_directory(ORGS, local)


class TestOrganizations:
    def test_local_orgs_for_metro_and_category(self, directory):
        orgs = directory.get_local_orgs("los-angeles", "housing")
        assert [o.name for o in orgs] == ["LA Family Housing"]

    def test_no_match_is_empty_list(self, directory):
        assert directory.get_local_orgs("chicago", "housing") == []
        assert directory.get_local_orgs("nowhere", "housing") == []

    def test_category_lookup(self, directory):
        category = directory.get_category("housing")
        assert category.organizations[0].has_local_chapters is True
        assert category.organizations[0].chapter_finder_url == "https://habitat.org/local"
        assert directory.get_category("unknown") is None

    def test_search_more_url(self):
        assert search_more_url("Housing", "90210") == (
            "https://www.google.com/search?q=Housing%20nonprofit%20organizations%20near%2090210"
        )
        assert search_more_url("Housing").endswith("near%20me")


class TestBundledData:
    """The shipped JSON must load and satisfy the directory invariants."""

    def test_bundled_data_loads(self):
        directory = get_directory()
        assert directory.categories
        assert directory.metros

    def test_issue_tiles_have_categories(self):
        directory = get_directory()
        for tile_id in ["environment", "voting-rights", "civil-rights", "healthcare", "education", "housing"]:
            assert directory.get_category(tile_id) is not None

    def test_bundled_prefix_902(self):
        metro = get_directory().get_metro_from_zip("90210")
        assert metro is not None
        assert "902" in metro.zip_prefixes

    def test_local_orgs_reference_known_metros_and_categories(self):
        directory = get_directory()
        metro_ids = {m.id for m in directory.metros}
        for metro_id, category_id in directory.local_orgs:
            assert metro_id in metro_ids
            assert directory.get_category(category_id) is not None
