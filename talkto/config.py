"""Application configuration loaded from environment variables."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings loaded from environment."""

    def __init__(self):
        self.congress_api_key: str = os.getenv("CONGRESS_API_KEY", "")
        self.reps_api_base_url: str = os.getenv(
            "REPS_API_BASE_URL", "https://api.5calls.org/v1"
        )
        self.trends_geo: str = os.getenv("TRENDS_GEO", "US")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def congress_api_base_url(self) -> str:
        return "https://api.congress.gov/v3"

    @property
    def google_trends_explore_url(self) -> str:
        return "https://trends.google.com/trends/explore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
