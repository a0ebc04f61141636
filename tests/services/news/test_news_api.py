"""Tests for the news REST routes."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pymongo.errors import AutoReconnect

from newshub.application import GeoClassifier, NewsAggregator, NewsFeedService, SourceTier
from newshub.domain import (
    Article,
    ArticleViewCounter,
    Category,
    GeographyCatalog,
    NewsQuery,
    NewsSource,
)
from newshub.infrastructure.sources import StaticDatasetSource
from newshub.services.news import NewsContainer
from newshub.services.news.api import include_routes

BASE_TIME = datetime(2024, 5, 6, 12, 0, tzinfo=timezone.utc)

SAMPLE = [
    {
        "title": "Pune gets a new science museum",
        "description": "Opens next month.",
        "url": "https://example.com/pune-museum",
        "category": "General",
        "country": "India",
        "state": "Maharashtra",
        "district": "Pune",
    },
    {
        "title": "Storm closes Atlantic ports",
        "description": "Shipping delayed.",
        "url": "https://example.com/storm",
        "category": "General",
        "country": "Canada",
    },
]


class _RecordingSource(NewsSource):
    name = "rss"

    def __init__(self, articles: List[Article]) -> None:
        self._articles = articles
        self.queries: list[NewsQuery] = []

    def fetch(self, query: NewsQuery) -> List[Article]:
        self.queries.append(query)
        return [a for a in self._articles if a.category is query.resolved_category]


class _MemoryCounter(ArticleViewCounter):
    def __init__(self) -> None:
        self.counts: Dict[str, int] = {}

    def record_view(self, url: str) -> int:
        self.counts[url] = self.counts.get(url, 0) + 1
        return self.counts[url]

    def counts_for(self, urls: Iterable[str]) -> Dict[str, int]:
        return {url: self.counts[url] for url in urls if url in self.counts}


class _DownCounter(_MemoryCounter):
    def record_view(self, url: str) -> int:
        raise AutoReconnect("connection lost")


class _ExplodingFeedService:
    def latest(self, query: NewsQuery) -> List[Article]:
        raise RuntimeError("boom")


def _live_articles() -> List[Article]:
    articles = []
    for i in range(8):
        articles.append(
            Article(
                title=f"Gadget launch {i}",
                description="Specs and price",
                source_url=f"https://tech.example.com/{i}",
                published_at=BASE_TIME - timedelta(hours=i),
                category=Category.TECHNOLOGY,
                image_url=f"https://tech.example.com/{i}.jpg",
                author="Tech Desk",
                source_name="Tech Daily",
            )
        )
    for i in range(6):
        articles.append(
            Article(
                title=f"Headline {i}",
                description="General news",
                source_url=f"https://news.example.com/{i}",
                published_at=BASE_TIME - timedelta(minutes=i),
                source_name="Daily",
            )
        )
    return articles


def _container(
    source: NewsSource | None = None, counter: ArticleViewCounter | None = None
) -> NewsContainer:
    catalog = GeographyCatalog.from_records(
        [
            {"name": "Maharashtra", "districts": ["Mumbai", "Pune"]},
            {"name": "Kerala", "districts": ["Ernakulam"]},
        ]
    )
    static_source = StaticDatasetSource(SAMPLE)
    tiers = [SourceTier("static", static_source, fallback=True)]
    if source is not None:
        tiers.insert(0, SourceTier("rss", source))
    aggregator = NewsAggregator(tiers, GeoClassifier(catalog))
    return NewsContainer(
        catalog=catalog,
        static_source=static_source,
        aggregator=aggregator,
        feed_service=NewsFeedService(aggregator, counter),
    )


def _client(container: NewsContainer) -> TestClient:
    app = FastAPI()
    include_routes(app, container)
    return TestClient(app)


@pytest.fixture
def source() -> _RecordingSource:
    return _RecordingSource(_live_articles())


def test_news_returns_camel_case_articles(source: _RecordingSource) -> None:
    client = _client(_container(source))

    response = client.get("/api/news", params={"category": "technology", "pageSize": 5})

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 5
    assert body[0]["title"] == "Gadget launch 0"
    assert body[0]["imageUrl"] == "https://tech.example.com/0.jpg"
    assert body[0]["sourceUrl"] == "https://tech.example.com/0"
    assert body[0]["source"] == "Tech Daily"
    assert body[0]["category"] == "Technology"
    assert body[0]["region"] == "international"
    assert body[0]["country"] == "Unknown"
    stamps = [item["publishedAt"] for item in body]
    assert stamps == sorted(stamps, reverse=True)


def test_news_defaults_invalid_parameters(source: _RecordingSource) -> None:
    client = _client(_container(source))

    response = client.get(
        "/api/news", params={"page": "abc", "pageSize": "-3", "region": "mars"}
    )

    assert response.status_code == 200
    query = source.queries[-1]
    assert query.page == 1
    assert query.page_size == 20
    assert query.region is None
    assert query.category == "general"


def test_news_forwards_geography_to_the_classifier(source: _RecordingSource) -> None:
    client = _client(_container(source))

    body = client.get(
        "/api/news",
        params={
            "region": "district",
            "country": "India",
            "state": "Maharashtra",
            "district": "Mumbai",
        },
    ).json()

    assert body
    assert {item["region"] for item in body} == {"district"}
    assert {item["district"] for item in body} == {"Mumbai"}


def test_news_falls_back_to_static_dataset() -> None:
    client = _client(_container(_RecordingSource([])))

    body = client.get("/api/news", params={"region": "international"}).json()

    assert [item["title"] for item in body] == ["Storm closes Atlantic ports"]


def test_news_unexpected_error_returns_500() -> None:
    container = _container()
    container.feed_service = _ExplodingFeedService()

    response = _client(container).get("/api/news")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch news: boom"


def test_trending_defaults_to_five(source: _RecordingSource) -> None:
    body = _client(_container(source)).get("/api/news/trending").json()

    assert [item["title"] for item in body] == [f"Headline {i}" for i in range(5)]


def test_popular_includes_view_counts(source: _RecordingSource) -> None:
    counter = _MemoryCounter()
    client = _client(_container(source, counter))

    for _ in range(3):
        client.post("/api/news/views", json={"url": "https://news.example.com/4"})

    body = client.get("/api/news/popular", params={"limit": 2}).json()

    assert [(item["title"], item["viewCount"]) for item in body] == [
        ("Headline 4", 3),
        ("Headline 0", 0),
    ]


def test_related_excludes_index(source: _RecordingSource) -> None:
    body = (
        _client(_container(source))
        .get("/api/news/related/0", params={"category": "technology"})
        .json()
    )

    assert [item["title"] for item in body] == [
        "Gadget launch 1",
        "Gadget launch 2",
        "Gadget launch 3",
    ]


def test_record_view_returns_total(source: _RecordingSource) -> None:
    client = _client(_container(source, _MemoryCounter()))

    response = client.post("/api/news/views", json={"url": "https://x.example.com"})

    assert response.status_code == 200
    assert response.json() == {"url": "https://x.example.com", "views": 1}


@pytest.mark.parametrize("counter", [None, _DownCounter()])
def test_record_view_unavailable_returns_503(source, counter) -> None:
    client = _client(_container(source, counter))

    response = client.post("/api/news/views", json={"url": "https://x.example.com"})

    assert response.status_code == 503


def test_states_lists_catalog() -> None:
    body = _client(_container()).get("/api/states").json()

    assert body["states"][0] == {"name": "Maharashtra", "districts": ["Mumbai", "Pune"]}
    assert len(body["states"]) == 2


def test_sample_dataset_is_served_verbatim() -> None:
    body = _client(_container()).get("/newsdata.json").json()

    assert body == SAMPLE


def test_state_filter_accepts_any_casing() -> None:
    client = _client(_container(_RecordingSource([])))

    body = client.get(
        "/api/news",
        params={"region": "district", "country": "India", "state": "maharashtra"},
    ).json()

    assert [item["title"] for item in body] == ["Pune gets a new science museum"]
    assert body[0]["state"] == "Maharashtra"
