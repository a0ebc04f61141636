"""HTTP clients for third-party headline APIs (NewsAPI and GNews)."""
from __future__ import annotations

import logging
from abc import abstractmethod
from typing import Any, Dict, List, Mapping, Optional

import httpx

from newshub.domain import Article, Category, NewsQuery, NewsSource

from .normalization import (
    absolute_image_url,
    build_description,
    strip_html,
    timestamp_or_now,
    usable_title,
)


class HeadlineApiSource(NewsSource):
    """Shared request/mapping flow for providers returning an ``articles`` list."""

    #: Endpoint requested by :meth:`fetch`.
    endpoint: str = ""
    #: Provider field holding the image address.
    image_field: str = ""

    def __init__(
        self,
        api_key: str,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = 10.0,
    ) -> None:
        """Create the source.

        Parameters
        ----------
        api_key:
            Credential sent with every request.
        client:
            Reusable :class:`httpx.Client`. When omitted the source creates
            one that lives as long as the process.
        timeout:
            Request timeout applied to the internally created client.
        """

        if not api_key:
            raise ValueError(f"{type(self).__name__} requires an API key")
        self._api_key = api_key
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._log = logging.getLogger(f"newshub.{self.name}")

    def fetch(self, query: NewsQuery) -> List[Article]:
        category = query.resolved_category
        try:
            response = self._client.get(self.endpoint, params=self.build_params(query))
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self._log.warning("%s request failed: %s", self.name, exc)
            return []

        items = payload.get("articles") if isinstance(payload, Mapping) else None
        if not isinstance(items, list):
            self._log.warning("%s response without an articles list", self.name)
            return []

        articles: List[Article] = []
        for item in items:
            if not isinstance(item, Mapping):
                continue
            article = self.map_article(item, category)
            if article is not None:
                articles.append(article)
        self._log.info("%s: %d of %d items usable", self.name, len(articles), len(items))
        return articles

    @abstractmethod
    def build_params(self, query: NewsQuery) -> Dict[str, Any]:
        """Query-string parameters for ``query``."""

    def map_article(
        self, item: Mapping[str, Any], category: Category
    ) -> Optional[Article]:
        """Convert a provider article; ``None`` when it has no usable title."""

        title = usable_title(item.get("title"))
        if title is None:
            return None
        source = item.get("source")
        source_name = ""
        if isinstance(source, Mapping):
            source_name = strip_html(source.get("name"))
        source_name = source_name or self.name
        return Article(
            title=title,
            description=build_description(item.get("description"), item.get("content")),
            source_url=str(item.get("url") or ""),
            published_at=timestamp_or_now(item.get("publishedAt")),
            category=category,
            image_url=absolute_image_url(item.get(self.image_field)),
            author=strip_html(item.get("author")) or source_name,
            source_name=source_name,
        )


class NewsApiSource(HeadlineApiSource):
    """``newsapi.org`` top headlines."""

    name = "newsapi"
    endpoint = "https://newsapi.org/v2/top-headlines"
    image_field = "urlToImage"

    def build_params(self, query: NewsQuery) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "category": query.resolved_category.key,
            "page": query.page,
            "pageSize": query.page_size,
            "apiKey": self._api_key,
        }
        if query.targets_india:
            params["country"] = "in"
        return params


class GNewsSource(HeadlineApiSource):
    """``gnews.io`` top headlines, used when the first provider has nothing."""

    name = "gnews"
    endpoint = "https://gnews.io/api/v4/top-headlines"
    image_field = "image"

    def build_params(self, query: NewsQuery) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "category": query.resolved_category.key,
            "lang": "en",
            "max": query.page_size,
            "page": query.page,
            "apikey": self._api_key,
        }
        if query.targets_india:
            params["country"] = "in"
        return params


__all__ = ["GNewsSource", "HeadlineApiSource", "NewsApiSource"]
