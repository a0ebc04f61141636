"""Application services of NewsHub."""

from .aggregator import NewsAggregator, SourceTier, filter_by_geography, sort_by_recency
from .geo_classifier import GeoClassifier
from .news_feed_service import NewsFeedService
from .newsletter_service import NewsletterService, SubscriptionResult

__all__ = [
    "GeoClassifier",
    "NewsAggregator",
    "NewsFeedService",
    "NewsletterService",
    "SourceTier",
    "SubscriptionResult",
    "filter_by_geography",
    "sort_by_recency",
]
