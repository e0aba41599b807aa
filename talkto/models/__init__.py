"""Domain models."""

from talkto.models.representative import (
    Bucket,
    ClassifiedRepresentative,
    Representative,
    RepsByLevel,
)
from talkto.models.trends import CivicTopic, TopicScore
from talkto.models.legislation import CategoryActivity, TrendingCategory
from talkto.models.organization import IssueCategory, Metro, Organization

__all__ = [
    "Bucket",
    "ClassifiedRepresentative",
    "Representative",
    "RepsByLevel",
    "CivicTopic",
    "TopicScore",
    "CategoryActivity",
    "TrendingCategory",
    "IssueCategory",
    "Metro",
    "Organization",
]
