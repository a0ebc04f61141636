"""Fallback source reading the bundled sample dataset."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

from newshub.domain import Article, Category, NewsQuery, NewsSource

from .normalization import (
    absolute_image_url,
    build_description,
    strip_html,
    usable_title,
    utcnow,
)


@dataclass(frozen=True)
class _SampleRecord:
    title: str
    description: str
    source_url: str
    category: Category
    image_url: Optional[str]
    author: str
    source_name: str
    country: Optional[str]
    state: Optional[str]
    district: Optional[str]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["_SampleRecord"]:
        title = usable_title(data.get("title"))
        if title is None:
            return None
        source_name = strip_html(data.get("source")) or "NewsHub"

        def text(key: str) -> Optional[str]:
            value = strip_html(data.get(key))
            return value or None

        return cls(
            title=title,
            description=build_description(data.get("description"), data.get("content")),
            source_url=str(data.get("url") or data.get("sourceUrl") or ""),
            category=Category.from_value(data.get("category")),
            image_url=absolute_image_url(
                data.get("image") or data.get("imageUrl") or data.get("urlToImage")
            ),
            author=strip_html(data.get("author")) or source_name,
            source_name=source_name,
            country=text("country"),
            state=text("state"),
            district=text("district"),
        )

    def to_article(self, stamp: datetime) -> Article:
        return Article(
            title=self.title,
            description=self.description,
            source_url=self.source_url,
            published_at=stamp,
            category=self.category,
            image_url=self.image_url,
            author=self.author,
            source_name=self.source_name,
            country=self.country,
            state=self.state,
            district=self.district,
        )


class StaticDatasetSource(NewsSource):
    """Serves sample articles when every live source came back empty.

    The file is read once at construction. Each call stamps the same current
    time on every returned article because sample data carries no meaningful
    publication date.
    """

    name = "static"

    def __init__(self, payload: Sequence[Mapping[str, Any]]) -> None:
        self._payload = [dict(item) for item in payload]
        records = (_SampleRecord.from_mapping(item) for item in self._payload)
        self._records = tuple(record for record in records if record is not None)
        self._log = logging.getLogger("newshub.static")

    @classmethod
    def from_file(cls, path: Path) -> "StaticDatasetSource":
        """Load the dataset from ``path``.

        Raises:
            ValueError: When the file does not hold a JSON array.
        """

        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, list):
            raise ValueError(f"Dataset {path} must contain a JSON array")
        return cls([item for item in payload if isinstance(item, Mapping)])

    @property
    def raw_payload(self) -> List[dict]:
        """The dataset as shipped, for the static asset route."""

        return [dict(item) for item in self._payload]

    def fetch(self, query: NewsQuery) -> List[Article]:
        target = query.resolved_category
        selected = [record for record in self._records if record.category is target]
        if not selected and target is not Category.GENERAL:
            self._log.info(
                "no sample articles tagged %s, using General", target.value
            )
            selected = [
                record
                for record in self._records
                if record.category is Category.GENERAL
            ]
        stamp = utcnow()
        return [record.to_article(stamp) for record in selected]


__all__ = ["StaticDatasetSource"]
