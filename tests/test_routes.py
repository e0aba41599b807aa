"""Route tests for the JSON endpoints and HTML partials."""

from unittest.mock import AsyncMock, patch

import httpx

from talkto.models import TrendingCategory
from talkto.services import congress_client, legislative_aggregator, public_trends_aggregator
from talkto.services.congress_api import CongressAPIError
from talkto.services.public_trends import FALLBACK_TRENDS, SOURCE_CURATED, SOURCE_LIVE
from tests.conftest import mock_async_client


class TestPublicTrendsEndpoint:
    def test_always_200_with_source(self, client):
        with patch.object(
            public_trends_aggregator, "get_trends",
            AsyncMock(return_value=(list(FALLBACK_TRENDS), SOURCE_CURATED)),
        ):
            response = client.get("/api/public-trends")

        assert response.status_code == 200
        body = response.json()
        assert body["source"] == "Curated"
        assert len(body["trends"]) == 6
        assert body["trends"][0]["searchVolume"] == "High"
        assert "Cache-Control" not in response.headers

    def test_live_trends(self, client):
        with patch.object(
            public_trends_aggregator, "_fetch_series", lambda term, geo: [75],
        ):
            response = client.get("/api/public-trends")

        body = response.json()
        assert response.status_code == 200
        assert body["source"] == SOURCE_LIVE
        assert all(t["intensity"] == 75 for t in body["trends"])


class TestTrendingEndpoint:
    def test_missing_key_is_500(self, client, monkeypatch):
        monkeypatch.setattr(congress_client, "api_key", "")
        response = client.get("/api/trending")

        assert response.status_code == 500
        assert response.json() == {"error": "Congress API key not configured"}

    def test_upstream_failure_is_500_without_fallback(self, client, monkeypatch):
        monkeypatch.setattr(congress_client, "api_key", "test-key")
        request = httpx.Request("GET", "https://api.congress.gov/v3/bill")
        with patch("talkto.services.congress_api.httpx.AsyncClient") as mock_client_class:
            mock_async_client(
                mock_client_class,
                status_code=500,
                error=httpx.HTTPStatusError(
                    "Server error", request=request, response=httpx.Response(500, request=request)
                ),
            )
            response = client.get("/api/trending")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch trending issues"}

    def test_success_has_cache_header(self, client, monkeypatch):
        monkeypatch.setattr(congress_client, "api_key", "test-key")
        with patch("talkto.services.congress_api.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"bills": [
                {"title": "Appropriations Act of 2025", "type": "HR", "number": "1",
                 "latestAction": {"text": "Passed House"}},
                {"title": "Designating a post office", "type": "HR", "number": "2"},
            ]})
            response = client.get("/api/trending")

        assert response.status_code == 200
        assert response.headers["Cache-Control"] == "public, max-age=3600"
        body = response.json()
        assert [c["title"] for c in body["trending"]] == ["Government Funding"]
        assert body["trending"][0]["billCount"] == 1
        assert "updated" in body

    def test_malformed_bill_is_500_json(self, client, monkeypatch):
        monkeypatch.setattr(congress_client, "api_key", "test-key")
        with patch("talkto.services.congress_api.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"bills": [
                {"title": "Budget Act", "type": "HR", "number": "1", "latestAction": "Passed"},
            ]})
            response = client.get("/api/trending")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch trending issues"}


class TestRepsEndpoint:
    def test_invalid_zip_is_400_without_network(self, client):
        with patch("talkto.services.representatives.httpx.AsyncClient") as mock_client_class:
            response = client.get("/reps", params={"zip": "9021"})
            mock_client_class.assert_not_called()

        assert response.status_code == 400
        assert response.json() == {"error": "Please enter a valid 5-digit zip code"}

    def test_invalid_zip_inline_for_htmx(self, client):
        response = client.get("/reps", params={"zip": "9021"}, headers={"HX-Request": "true"})
        assert response.status_code == 200
        assert "Please enter a valid 5-digit zip code" in response.text

    def test_no_representatives_is_404(self, client):
        with patch("talkto.services.representatives.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"representatives": []})
            response = client.get("/reps", params={"zip": "90210"})

        assert response.status_code == 404
        assert response.json() == {"error": "No representatives found for this zip code"}

    def test_buckets_json(self, client):
        with patch("talkto.services.representatives.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"representatives": [
                {"name": "Senator One", "party": "Democrat", "reason": "Senator", "area": "US Senate"},
                {"name": "Rep One", "party": "Republican", "reason": "Representative", "area": "US House"},
                {"name": "Gov One", "party": "Democrat", "reason": "Governor", "area": "Governor"},
            ]})
            response = client.get("/reps", params={"zip": "90210"})

        body = response.json()
        assert response.status_code == 200
        assert body["zip"] == "90210"
        assert [r["name"] for r in body["senators"]] == ["Senator One"]
        assert [r["name"] for r in body["house_reps"]] == ["Rep One"]
        assert body["state"][0]["title"] == "Governor"

    def test_cards_partial(self, client):
        with patch("talkto.services.representatives.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"representatives": [
                {"name": "Senator One", "party": "Democrat", "reason": "Senator", "area": "US Senate",
                 "phone": "202-224-3121", "url": "https://www.one.senate.gov/"},
            ]})
            response = client.get("/reps", params={"zip": "90210"}, headers={"HX-Request": "true"})

        assert response.status_code == 200
        assert "Your US Senators" in response.text
        assert "(202) 224-3121" in response.text
        assert "https://www.one.senate.gov/contact" in response.text


class TestOrganizationsEndpoint:
    def test_localized_results(self, client):
        response = client.get("/organizations", params={"category": "housing", "zip": "90210"})
        body = response.json()

        assert response.status_code == 200
        assert body["metro"]["id"] == "los-angeles"
        assert body["local_organizations"]
        assert body["organizations"]
        assert body["search_url"].endswith("near%2090210")

    def test_unmapped_zip_has_no_local_orgs(self, client):
        response = client.get("/organizations", params={"category": "housing", "zip": "59001"})
        body = response.json()

        assert body["metro"] is None
        assert body["local_organizations"] == []

    def test_unknown_category_is_404(self, client):
        response = client.get("/organizations", params={"category": "knitting"})
        assert response.status_code == 404

    def test_categories(self, client):
        body = client.get("/organizations/categories").json()
        assert {"id": "housing", "name": "Housing"} in body["categories"]
        assert len(body["popular"]) == 6

    def test_partial(self, client):
        response = client.get(
            "/organizations", params={"category": "housing", "zip": "90210"},
            headers={"HX-Request": "true"},
        )
        assert "Local to Los Angeles" in response.text
        assert "National Organizations" in response.text


class TestPages:
    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Enter your zip code" in response.text
        assert "Voting Rights" in response.text

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_congress_panel_falls_back(self, client):
        with patch.object(
            legislative_aggregator, "get_trending",
            AsyncMock(side_effect=CongressAPIError("down")),
        ):
            response = client.get("/panels/congress")

        assert response.status_code == 200
        assert "Government Funding" in response.text
        assert "8 bills" in response.text

    def test_congress_panel_falls_back_on_malformed_bill(self, client, monkeypatch):
        monkeypatch.setattr(congress_client, "api_key", "test-key")
        with patch("talkto.services.congress_api.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, json_data={"bills": [
                {"title": 42, "type": "HR", "number": "1"},
            ]})
            response = client.get("/panels/congress")

        assert response.status_code == 200
        assert "Government Funding" in response.text

    def test_congress_panel_live(self, client):
        live = [TrendingCategory("taxes", "Taxes", "", 30, "📊", 3, "https://www.congress.gov/search?q=Taxes")]
        with patch.object(legislative_aggregator, "get_trending", AsyncMock(return_value=live)):
            response = client.get("/panels/congress")

        assert "Taxes" in response.text
        assert "3 bills" in response.text
        assert "%22congress%22%3A%22119%22" in response.text
        assert "Updated" in response.text

    def test_public_concerns_panel(self, client):
        with patch.object(
            public_trends_aggregator, "get_trends",
            AsyncMock(return_value=(list(FALLBACK_TRENDS), SOURCE_CURATED)),
        ):
            response = client.get("/panels/public-concerns")

        assert "Economy" in response.text
        assert "High searches" in response.text
