"""Ordered-fallback aggregation across news sources."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from newshub.domain import Article, NewsQuery, NewsSource, Region
from newshub.domain.entities import is_india

from .geo_classifier import GeoClassifier


@dataclass(frozen=True)
class SourceTier:
    """One step of the fallback chain."""

    name: str
    source: NewsSource
    #: The last-resort tier: its result is returned even when empty and it is
    #: filtered by geography instead of being tagged with the query's geography.
    fallback: bool = False


def sort_by_recency(articles: Iterable[Article]) -> List[Article]:
    """Newest first; equal timestamps keep their arrival order."""

    return sorted(articles, key=lambda article: article.published_at, reverse=True)


def _same(expected: Optional[str], actual: Optional[str]) -> bool:
    return (actual or "").strip() == expected.strip()


def filter_by_geography(
    articles: Iterable[Article],
    region: Region | None = None,
    state: str | None = None,
    district: str | None = None,
    country: str | None = None,
) -> List[Article]:
    """Keep the classified articles that match the requested geography.

    Only three combinations filter anything: domestic India, international
    and district India. Every other combination passes articles through.
    """

    items = list(articles)
    if region is Region.DOMESTIC and is_india(country):
        return [
            article
            for article in items
            if article.region is Region.DOMESTIC or is_india(article.country)
        ]
    if region is Region.INTERNATIONAL:
        return [
            article
            for article in items
            if article.region is Region.INTERNATIONAL and not is_india(article.country)
        ]
    if region is Region.DISTRICT and is_india(country):

        def keep(article: Article) -> bool:
            if state and not _same(state, article.state):
                return False
            if district and not _same(district, article.district):
                return False
            return article.region is Region.DISTRICT or (
                is_india(article.country) and bool(article.state)
            )

        return [article for article in items if keep(article)]
    return items


class NewsAggregator:
    """Tries each source tier in order until one yields articles."""

    def __init__(self, tiers: Sequence[SourceTier], classifier: GeoClassifier) -> None:
        """Configure the fallback chain.

        Args:
            tiers: Source tiers in priority order. At most the last one should
                be flagged as ``fallback``; tiers after it are never reached.
            classifier: Classifier applied to every returned article.
        """

        self._tiers = tuple(tiers)
        self._classifier = classifier
        self._log = logging.getLogger("newshub.aggregator")

    @property
    def tier_names(self) -> tuple[str, ...]:
        return tuple(tier.name for tier in self._tiers)

    def aggregate(self, query: NewsQuery) -> List[Article]:
        """Return the sorted articles of the first tier that produced any.

        Source errors never escape: a failing tier counts as empty and the
        next one is tried. An empty list means every tier came back empty.
        """

        for tier in self._tiers:
            fetched = self._fetch(tier, query)
            if tier.fallback:
                return self._finish_fallback(fetched, query)
            articles = self._deduplicate(fetched)
            if not articles:
                self._log.info("%s produced no articles, trying next source", tier.name)
                continue
            classified = [
                self._classifier.classify(
                    article,
                    region=query.region,
                    state=query.state,
                    district=query.district,
                    country=query.country,
                )
                for article in articles
            ]
            self._log.info("%s served %d articles", tier.name, len(classified))
            return sort_by_recency(classified)[: query.page_size]

        self._log.warning("every news source came back empty")
        return []

    def _fetch(self, tier: SourceTier, query: NewsQuery) -> List[Article]:
        try:
            return list(tier.source.fetch(query))
        except Exception:
            self._log.exception("source %s failed", tier.name)
            return []

    def _finish_fallback(
        self, fetched: Sequence[Article], query: NewsQuery
    ) -> List[Article]:
        classified = [
            self._classifier.classify(article) for article in self._deduplicate(fetched)
        ]
        filtered = filter_by_geography(
            classified,
            region=query.region,
            state=query.state,
            district=query.district,
            country=query.country,
        )
        start = (query.page - 1) * query.page_size
        page = sort_by_recency(filtered)[start : start + query.page_size]
        self._log.info(
            "fallback dataset served %d of %d matching articles",
            len(page),
            len(filtered),
        )
        return page

    @staticmethod
    def _deduplicate(articles: Iterable[Article]) -> List[Article]:
        """Drop untitled entries and repeated article links."""

        seen_urls: set[str] = set()
        unique: List[Article] = []
        for article in articles:
            if not article.title or not article.title.strip():
                continue
            url = article.source_url.strip()
            if url.startswith(("http://", "https://")):
                if url in seen_urls:
                    continue
                seen_urls.add(url)
            unique.append(article)
        return unique


__all__ = ["NewsAggregator", "SourceTier", "filter_by_geography", "sort_by_recency"]
