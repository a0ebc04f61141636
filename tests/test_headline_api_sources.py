"""Tests for the NewsAPI and GNews clients."""
from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from newshub.domain import Category, NewsQuery, Region
from newshub.infrastructure.sources import GNewsSource, NewsApiSource


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_newsapi_maps_articles_and_sends_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "status": "ok",
                "articles": [
                    {
                        "source": {"id": None, "name": "The Hindu"},
                        "author": None,
                        "title": "Parliament passes data bill",
                        "description": "The bill now goes to the upper house.",
                        "url": "https://www.thehindu.com/news/data-bill",
                        "urlToImage": "https://th-i.thgim.com/bill.jpg",
                        "publishedAt": "2024-05-06T10:00:00Z",
                        "content": "Full text [+1200 chars]",
                    },
                    {
                        "source": {"id": None, "name": "[Removed]"},
                        "title": "[Removed]",
                        "url": "https://removed.com",
                    },
                ],
            },
        )

    source = NewsApiSource("secret", client=_client(handler))
    query = NewsQuery(category="business", page=2, page_size=10, country="India")

    articles = source.fetch(query)

    assert len(articles) == 1
    article = articles[0]
    assert article.title == "Parliament passes data bill"
    assert article.author == "The Hindu"
    assert article.source_name == "The Hindu"
    assert article.category is Category.BUSINESS
    assert article.image_url == "https://th-i.thgim.com/bill.jpg"
    assert article.published_at == datetime(2024, 5, 6, 10, 0, tzinfo=timezone.utc)

    params = seen[0].url.params
    assert seen[0].url.host == "newsapi.org"
    assert params["category"] == "business"
    assert params["page"] == "2"
    assert params["pageSize"] == "10"
    assert params["apiKey"] == "secret"
    assert params["country"] == "in"


def test_newsapi_rejects_invalid_images() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "articles": [
                    {
                        "title": "Inline image",
                        "url": "https://example.com/a",
                        "urlToImage": "data:image/png;base64,AAAA",
                        "publishedAt": "2024-05-06T10:00:00Z",
                    }
                ]
            },
        )

    [article] = NewsApiSource("k", client=_client(handler)).fetch(NewsQuery())

    assert article.image_url is None
    assert article.author == "newsapi"
    assert article.source_name == "newsapi"


@pytest.mark.parametrize("status", [401, 429, 500])
def test_http_errors_yield_empty_list(status: int) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json={"status": "error"})

    assert NewsApiSource("k", client=_client(handler)).fetch(NewsQuery()) == []


def test_connection_errors_yield_empty_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    assert GNewsSource("k", client=_client(handler)).fetch(NewsQuery()) == []


def test_invalid_json_yields_empty_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>maintenance</html>")

    assert GNewsSource("k", client=_client(handler)).fetch(NewsQuery()) == []


def test_gnews_uses_its_own_fields() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "totalArticles": 1,
                "articles": [
                    {
                        "title": "Stocks close higher",
                        "description": "<b>Sensex</b> gains 300 points",
                        "url": "https://example.com/stocks",
                        "image": "https://example.com/stocks.jpg",
                        "publishedAt": "2024-05-06T09:30:00Z",
                        "source": {"name": "Mint", "url": "https://livemint.com"},
                    }
                ],
            },
        )

    source = GNewsSource("key", client=_client(handler))

    [article] = source.fetch(NewsQuery(category="general", region=Region.INTERNATIONAL))

    assert article.image_url == "https://example.com/stocks.jpg"
    assert article.description == "Sensex gains 300 points"
    assert article.source_name == "Mint"
    params = seen[0].url.params
    assert seen[0].url.host == "gnews.io"
    assert params["lang"] == "en"
    assert params["max"] == "20"
    assert params["apikey"] == "key"
    assert "country" not in params


def test_missing_api_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        NewsApiSource("")


def test_author_falls_back_to_source_name_then_provider() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "articles": [
                    {
                        "title": "Byline present",
                        "author": "Priya Sharma",
                        "source": {"name": "Mint"},
                        "url": "https://example.com/1",
                    },
                    {
                        "title": "Outlet only",
                        "source": {"name": "Mint"},
                        "url": "https://example.com/2",
                    },
                    {"title": "Nothing at all", "url": "https://example.com/3"},
                ]
            },
        )

    articles = GNewsSource("k", client=_client(handler)).fetch(NewsQuery())

    assert [(a.author, a.source_name) for a in articles] == [
        ("Priya Sharma", "Mint"),
        ("Mint", "Mint"),
        ("gnews", "gnews"),
    ]
