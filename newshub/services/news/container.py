"""Dependency container for the news aggregation service."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from newshub.application import GeoClassifier, NewsAggregator, NewsFeedService, SourceTier
from newshub.domain import ArticleViewCounter, GeographyCatalog, NewsSource
from newshub.infrastructure.database import MongoClientFactory
from newshub.infrastructure.repositories import MongoArticleViewCounter
from newshub.infrastructure.sources import (
    GNewsSource,
    NewsApiSource,
    RssFeedSource,
    StaticDatasetSource,
)
from newshub.settings import (
    get_api_timeout,
    get_dataset_path,
    get_feed_timeout,
    get_geography_path,
    get_gnews_api_key,
    get_news_api_key,
)

_VIEWS_COLLECTION = "article_views"


@dataclass
class NewsContainer:
    """Objects shared by every news request; built once at start-up."""

    catalog: GeographyCatalog
    static_source: StaticDatasetSource
    aggregator: NewsAggregator
    feed_service: NewsFeedService


def build_source_tiers(
    *,
    rss_source: NewsSource,
    static_source: NewsSource,
    news_api_key: str | None = None,
    gnews_api_key: str | None = None,
    api_timeout: float | None = None,
) -> List[SourceTier]:
    """Fallback chain: RSS, configured headline APIs, then the static dataset."""

    tiers = [SourceTier(name="rss", source=rss_source)]
    if news_api_key:
        tiers.append(
            SourceTier(
                name="newsapi", source=NewsApiSource(news_api_key, timeout=api_timeout)
            )
        )
    if gnews_api_key:
        tiers.append(
            SourceTier(
                name="gnews", source=GNewsSource(gnews_api_key, timeout=api_timeout)
            )
        )
    tiers.append(SourceTier(name="static", source=static_source, fallback=True))
    return tiers


def build_news_container(
    *,
    news_api_key: str | None = None,
    gnews_api_key: str | None = None,
    dataset_path: Path | None = None,
    geography_path: Path | None = None,
    rss_source: NewsSource | None = None,
    view_counter: ArticleViewCounter | None = None,
    mongo_factory: MongoClientFactory | None = None,
) -> NewsContainer:
    """Build the news service container.

    Explicit arguments win over the environment. When no ``view_counter`` is
    given, one backed by MongoDB is created; the connection is only opened on
    first use.
    """

    log = logging.getLogger("newshub.container")
    catalog = GeographyCatalog.load(geography_path or get_geography_path())
    static_source = StaticDatasetSource.from_file(dataset_path or get_dataset_path())
    rss_source = rss_source or RssFeedSource(timeout=get_feed_timeout())

    tiers = build_source_tiers(
        rss_source=rss_source,
        static_source=static_source,
        news_api_key=news_api_key or get_news_api_key(),
        gnews_api_key=gnews_api_key or get_gnews_api_key(),
        api_timeout=get_api_timeout(),
    )
    aggregator = NewsAggregator(tiers, GeoClassifier(catalog))
    log.info("news sources: %s", " -> ".join(aggregator.tier_names))

    if view_counter is None:
        database = (mongo_factory or MongoClientFactory()).get_database()
        view_counter = MongoArticleViewCounter(database[_VIEWS_COLLECTION])

    return NewsContainer(
        catalog=catalog,
        static_source=static_source,
        aggregator=aggregator,
        feed_service=NewsFeedService(aggregator, view_counter),
    )


__all__ = ["NewsContainer", "build_news_container", "build_source_tiers"]
