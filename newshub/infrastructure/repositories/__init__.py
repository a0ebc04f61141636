"""MongoDB-backed repositories."""

from .mongo_subscription_repository import MongoSubscriptionRepository
from .mongo_view_counter import MongoArticleViewCounter

__all__ = ["MongoArticleViewCounter", "MongoSubscriptionRepository"]
