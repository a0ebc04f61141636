"""News source adapters."""

from .feeds import FEED_REGISTRY, FeedSpec
from .headline_api import GNewsSource, HeadlineApiSource, NewsApiSource
from .images import extract_image
from .rss import RssFeedSource
from .static_dataset import StaticDatasetSource

__all__ = [
    "FEED_REGISTRY",
    "FeedSpec",
    "GNewsSource",
    "HeadlineApiSource",
    "NewsApiSource",
    "RssFeedSource",
    "StaticDatasetSource",
    "extract_image",
]
