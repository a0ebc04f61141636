"""Ports connecting the domain to sources and storage adapters."""
from .news_source import NewsSource
from .subscription_repository import SubscriptionRepository
from .view_counter import ArticleViewCounter

__all__ = ["ArticleViewCounter", "NewsSource", "SubscriptionRepository"]
