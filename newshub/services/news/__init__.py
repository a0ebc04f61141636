"""News aggregation service dependency container."""

from .container import NewsContainer, build_news_container

__all__ = ["NewsContainer", "build_news_container"]
