"""Entities describing aggregated articles and the queries that produce them."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

MAX_PAGE_SIZE = 100
INDIA = "India"


class Category(str, Enum):
    """Editorial sections every article is filed under."""

    TECHNOLOGY = "Technology"
    SCIENCE = "Science"
    BUSINESS = "Business"
    HEALTH = "Health"
    ENTERTAINMENT = "Entertainment"
    SPORTS = "Sports"
    GENERAL = "General"

    @classmethod
    def from_value(cls, value: Any) -> "Category":
        """Resolve a category case-insensitively, defaulting to ``GENERAL``."""

        text = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        return cls.GENERAL

    @property
    def key(self) -> str:
        """Lower-case name used in query strings and feed registries."""

        return self.value.lower()


class Region(str, Enum):
    """Geographic scope assigned by the classifier."""

    DOMESTIC = "domestic"
    INTERNATIONAL = "international"
    DISTRICT = "district"

    @classmethod
    def parse(cls, value: Any) -> Optional["Region"]:
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        return None


def is_india(country: Optional[str]) -> bool:
    return bool(country) and country.strip().lower() == INDIA.lower()


@dataclass(frozen=True)
class Article:
    """Normalized article shared by every news source."""

    #: Headline shown to readers; never empty in a result list.
    title: str
    #: Plain-text teaser, truncated when built from raw content.
    description: str
    #: Link to the original publication.
    source_url: str
    #: Publication instant in UTC.
    published_at: datetime
    #: Section the article was filed under.
    category: Category = Category.GENERAL
    #: Absolute ``http(s)`` image address, when one was found.
    image_url: Optional[str] = None
    #: Byline, falling back to the source name.
    author: str = "Unknown"
    #: Feed or provider that delivered the article.
    source_name: str = ""
    #: Scope set by the geographic classifier.
    region: Optional[Region] = None
    country: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None

    def with_geography(
        self,
        region: Region,
        country: Optional[str],
        state: Optional[str],
        district: Optional[str],
    ) -> "Article":
        """Return a copy tagged with the given geography."""

        return replace(
            self, region=region, country=country, state=state, district=district
        )

    def to_payload(self) -> Dict[str, Any]:
        """Serialize the article to the JSON shape used by the front end."""

        return {
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "author": self.author,
            "publishedAt": self.published_at.isoformat(),
            "category": self.category.value,
            "sourceUrl": self.source_url,
            "source": self.source_name,
            "region": self.region.value if self.region else None,
            "country": self.country,
            "state": self.state,
            "district": self.district,
        }


@dataclass(frozen=True)
class NewsQuery:
    """Caller parameters for one aggregation run; ``None`` means no filter."""

    category: str = "general"
    page: int = 1
    page_size: int = 20
    region: Optional[Region] = None
    state: Optional[str] = None
    district: Optional[str] = None
    country: Optional[str] = None

    def __post_init__(self) -> None:
        if self.page < 1:
            object.__setattr__(self, "page", 1)
        size = min(max(self.page_size, 1), MAX_PAGE_SIZE)
        object.__setattr__(self, "page_size", size)

    @property
    def resolved_category(self) -> Category:
        return Category.from_value(self.category)

    @property
    def targets_india(self) -> bool:
        """Whether the caller asked for Indian coverage."""

        return is_india(self.country) or self.region in (
            Region.DOMESTIC,
            Region.DISTRICT,
        )


__all__ = [
    "Article",
    "Category",
    "INDIA",
    "MAX_PAGE_SIZE",
    "NewsQuery",
    "Region",
    "is_india",
]
