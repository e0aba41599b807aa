"""Service clients for external APIs and the static directory."""

from talkto.services.congress_api import congress_client
from talkto.services.directory import get_directory
from talkto.services.legislation import legislative_aggregator
from talkto.services.public_trends import public_trends_aggregator
from talkto.services.representatives import reps_client

__all__ = [
    "congress_client",
    "get_directory",
    "legislative_aggregator",
    "public_trends_aggregator",
    "reps_client",
]
