"""Public domain API of NewsHub.

Entities and ports are re-exported here so they can be imported directly from
``newshub.domain``.
"""

from .entities import (
    Article,
    Category,
    GeographyCatalog,
    NewsQuery,
    Region,
    StateRecord,
)
from .ports import ArticleViewCounter, NewsSource, SubscriptionRepository

__all__ = [
    "Article",
    "ArticleViewCounter",
    "Category",
    "GeographyCatalog",
    "NewsQuery",
    "NewsSource",
    "Region",
    "StateRecord",
    "SubscriptionRepository",
]
