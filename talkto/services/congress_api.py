"""Congress.gov API client for recently updated bills."""

import logging

import httpx

from talkto.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class CongressAPIError(Exception):
    """Raised when bill data cannot be fetched or parsed."""


class MissingAPIKeyError(CongressAPIError):
    """Raised at request time when no Congress.gov API key is configured."""


class CongressAPIClient:
    """Client for Congress.gov API."""

    def __init__(self):
        self.base_url = settings.congress_api_base_url
        self.api_key = settings.congress_api_key

    def _get_params(self, **kwargs) -> dict:
        params = {"api_key": self.api_key, "format": "json"}
        params.update(kwargs)
        return params

    async def get_recent_bills(self, limit: int = 50) -> list[dict]:
        """Get the most recently updated bills across both chambers.

        Raises:
            MissingAPIKeyError: if CONGRESS_API_KEY is not set.
            CongressAPIError: on network errors, non-2xx status or a payload
                without a ``bills`` list.
        """
        if not self.api_key:
            raise MissingAPIKeyError("Congress API key not configured")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/bill",
                    headers={"Accept": "application/json"},
                    params=self._get_params(limit=limit, sort="updateDate desc"),
                    timeout=30.0,
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CongressAPIError(f"Congress API error: {exc}") from exc

        bills = data.get("bills") if isinstance(data, dict) else None
        if not isinstance(bills, list):
            raise CongressAPIError("Congress API response has no bills list")

        return bills


congress_client = CongressAPIClient()
