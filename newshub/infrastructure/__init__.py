"""Infrastructure adapters: news sources, MongoDB access and repositories."""

from .database import MongoClientFactory, MongoSettings
from .repositories import MongoArticleViewCounter, MongoSubscriptionRepository

__all__ = [
    "MongoArticleViewCounter",
    "MongoClientFactory",
    "MongoSettings",
    "MongoSubscriptionRepository",
]
