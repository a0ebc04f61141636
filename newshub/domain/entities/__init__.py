"""Domain entities exposed by ``newshub.domain.entities``."""

from .article import (
    INDIA,
    MAX_PAGE_SIZE,
    Article,
    Category,
    NewsQuery,
    Region,
    is_india,
)
from .geography import GeographyCatalog, StateRecord

__all__ = [
    "Article",
    "Category",
    "GeographyCatalog",
    "INDIA",
    "MAX_PAGE_SIZE",
    "NewsQuery",
    "Region",
    "StateRecord",
    "is_india",
]
