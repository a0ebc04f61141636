"""NewsHub - categorized, geotagged news aggregation."""
from .application import NewsAggregator, NewsFeedService, NewsletterService
from .domain import Article, Category, NewsQuery, Region
from .services.news import build_news_container
from .services.newsletter import build_newsletter_container

__all__ = [
    "Article",
    "Category",
    "NewsAggregator",
    "NewsFeedService",
    "NewsQuery",
    "NewsletterService",
    "Region",
    "build_news_container",
    "build_newsletter_container",
]
