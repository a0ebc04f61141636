"""Tests for the news source chain as wired by the container."""
from __future__ import annotations

import requests

from newshub.application import GeoClassifier, NewsAggregator
from newshub.domain import Category, GeographyCatalog, NewsQuery
from newshub.infrastructure.sources import RssFeedSource, StaticDatasetSource
from newshub.services.news.container import build_source_tiers
from newshub.settings import get_dataset_path, get_geography_path


class _UnreachableSession:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def get(self, url: str, headers: dict | None = None, timeout: float | None = None):
        self.calls.append(url)
        raise requests.ConnectionError(f"cannot reach {url}")


def test_unreachable_feeds_without_api_keys_serve_the_static_dataset() -> None:
    session = _UnreachableSession()
    tiers = build_source_tiers(
        rss_source=RssFeedSource(session=session),
        static_source=StaticDatasetSource.from_file(get_dataset_path()),
        news_api_key=None,
        gnews_api_key=None,
    )
    aggregator = NewsAggregator(
        tiers, GeoClassifier(GeographyCatalog.load(get_geography_path()))
    )

    articles = aggregator.aggregate(NewsQuery(category="technology", page_size=5))

    assert aggregator.tier_names == ("rss", "static")
    assert len(session.calls) == 3
    assert 0 < len(articles) <= 5
    assert {article.category for article in articles} <= {
        Category.TECHNOLOGY,
        Category.GENERAL,
    }
    assert len({article.published_at for article in articles}) == 1


def test_configured_keys_add_headline_tiers_in_order() -> None:
    tiers = build_source_tiers(
        rss_source=RssFeedSource(session=_UnreachableSession()),
        static_source=StaticDatasetSource([]),
        news_api_key="a",
        gnews_api_key="b",
    )

    assert [tier.name for tier in tiers] == ["rss", "newsapi", "gnews", "static"]
    assert [tier.fallback for tier in tiers] == [False, False, False, True]
