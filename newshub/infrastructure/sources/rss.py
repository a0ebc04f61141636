"""RSS source backed by requests and feedparser."""
from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Sequence

import feedparser
import requests

from newshub.domain import Article, Category, NewsQuery, NewsSource

from .feeds import FEED_REGISTRY, FeedRegistry, FeedSpec
from .images import DEFAULT_EXTRACTORS, ImageExtractor, extract_image
from .normalization import (
    build_description,
    origin_of,
    strip_html,
    timestamp_or_now,
    usable_title,
)

MAX_FEEDS_PER_CATEGORY = 3

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/126.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "application/rss+xml,application/atom+xml,application/xml;q=0.9,"
        "text/xml;q=0.8,*/*;q=0.5"
    ),
    "Accept-Language": "en-IN,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Cache-Control": "no-cache",
}


class RssFeedSource(NewsSource):
    """Reads up to three category feeds and merges their entries."""

    name = "rss"

    def __init__(
        self,
        registry: FeedRegistry | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float = 5.0,
        max_feeds: int = MAX_FEEDS_PER_CATEGORY,
        extractors: Sequence[ImageExtractor] = DEFAULT_EXTRACTORS,
    ) -> None:
        self._registry = registry if registry is not None else FEED_REGISTRY
        self._session = session or requests.Session()
        self._timeout = timeout
        self._max_feeds = max_feeds
        self._extractors = extractors
        self._log = logging.getLogger("newshub.rss")

    def feeds_for(self, category: Category) -> tuple[FeedSpec, ...]:
        """Feeds registered for ``category``; unknown keys use ``general``."""

        feeds = self._registry.get(category.key) or self._registry.get("general", ())
        return tuple(feeds[: self._max_feeds])

    def fetch(self, query: NewsQuery) -> List[Article]:
        category = query.resolved_category
        feeds = self.feeds_for(category)
        if not feeds:
            self._log.info("no feeds registered for %s", category.key)
            return []

        per_feed = math.ceil(query.page_size / len(feeds))
        articles: List[Article] = []
        for feed in feeds:
            try:
                items = self._fetch_feed(feed, category, per_feed)
            except Exception as exc:
                self._log.warning("feed %s (%s) skipped: %s", feed.name, feed.url, exc)
                continue
            if not items:
                self._log.info("feed %s returned no usable items", feed.name)
                continue
            self._log.debug("feed %s: %d items", feed.name, len(items))
            articles.extend(items)
        return articles

    def _fetch_feed(
        self, feed: FeedSpec, category: Category, limit: int
    ) -> List[Article]:
        self._log.info("GET %s", feed.url)
        response = self._session.get(
            feed.url, headers=dict(_DEFAULT_HEADERS), timeout=self._timeout
        )
        response.raise_for_status()
        # Entry markup is only mined for text and URLs, never rendered.
        parsed = feedparser.parse(
            response.content, sanitize_html=False, resolve_relative_uris=False
        )
        if parsed.get("bozo") and not parsed.get("entries"):
            raise ValueError(f"malformed feed: {parsed.get('bozo_exception')}")

        channel = parsed.get("feed") or {}
        feed_title = strip_html(channel.get("title")) or feed.name
        base = origin_of(channel.get("link") or "") or origin_of(feed.url)

        items: List[Article] = []
        for idx, entry in enumerate(parsed.get("entries") or [], start=1):
            if len(items) >= limit:
                break
            try:
                article = self._entry_to_article(entry, feed_title, base, category)
            except Exception as exc:
                self._log.debug("%s item %d ignored: %s", feed.name, idx, exc)
                continue
            if article is not None:
                items.append(article)
        return items

    def _entry_to_article(
        self,
        entry: Mapping[str, Any],
        feed_title: str,
        base: str,
        category: Category,
    ) -> Article | None:
        title = usable_title(entry.get("title"))
        if title is None:
            return None
        contents = [
            block.get("value")
            for block in entry.get("content") or []
            if isinstance(block, Mapping)
        ]
        return Article(
            title=title,
            description=build_description(entry.get("summary"), *contents),
            source_url=str(entry.get("link") or ""),
            published_at=timestamp_or_now(
                entry.get("published_parsed"),
                entry.get("updated_parsed"),
                entry.get("published"),
            ),
            category=category,
            image_url=extract_image(entry, base, self._extractors),
            author=strip_html(entry.get("author")) or feed_title or "Unknown",
            source_name=feed_title,
        )


__all__ = ["MAX_FEEDS_PER_CATEGORY", "RssFeedSource"]
