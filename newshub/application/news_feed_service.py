"""Read-side operations built on top of the aggregator."""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from newshub.domain import Article, ArticleViewCounter, NewsQuery

from .aggregator import NewsAggregator

DEFAULT_POOL_SIZE = 20


def _parse_index(article_id: str) -> int | None:
    try:
        return int(str(article_id).strip())
    except ValueError:
        return None


class NewsFeedService:
    """Serves the latest, trending, popular and related article lists."""

    def __init__(
        self,
        aggregator: NewsAggregator,
        view_counter: ArticleViewCounter | None = None,
    ) -> None:
        self._aggregator = aggregator
        self._view_counter = view_counter
        self._log = logging.getLogger("newshub.feed")

    def latest(self, query: NewsQuery) -> List[Article]:
        return self._aggregator.aggregate(query)

    def trending(self, limit: int) -> List[Article]:
        """Top ``limit`` articles of a general aggregation, newest first."""

        query = NewsQuery(category="general", page_size=max(limit, DEFAULT_POOL_SIZE))
        return self._aggregator.aggregate(query)[:limit]

    def popular(self, limit: int) -> List[Tuple[Article, int]]:
        """General articles ranked by recorded views.

        Articles with the same number of views keep their recency order, so
        without any recorded view this is the trending list.
        """

        query = NewsQuery(category="general", page_size=max(limit, DEFAULT_POOL_SIZE))
        articles = self._aggregator.aggregate(query)
        counts = self._view_counts(articles)
        ranked = sorted(
            articles, key=lambda article: counts.get(article.source_url, 0), reverse=True
        )
        return [(article, counts.get(article.source_url, 0)) for article in ranked[:limit]]

    def related(self, article_id: str, category: str, limit: int) -> List[Article]:
        """Articles of ``category`` without the one at position ``article_id``."""

        query = NewsQuery(category=category, page_size=max(limit + 1, DEFAULT_POOL_SIZE))
        articles = self._aggregator.aggregate(query)
        excluded = _parse_index(article_id)
        remaining = [
            article for index, article in enumerate(articles) if index != excluded
        ]
        return remaining[:limit]

    def record_view(self, url: str) -> int:
        """Count one view of ``url``.

        Raises:
            RuntimeError: When no view counter is configured.
        """

        if self._view_counter is None:
            raise RuntimeError("View tracking is not configured")
        return self._view_counter.record_view(url)

    def _view_counts(self, articles: Sequence[Article]) -> Dict[str, int]:
        if self._view_counter is None or not articles:
            return {}
        try:
            return self._view_counter.counts_for(
                article.source_url for article in articles
            )
        except Exception as exc:
            self._log.warning("view counts unavailable, ranking by recency: %s", exc)
            return {}


__all__ = ["NewsFeedService"]
