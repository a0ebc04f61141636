"""Assigns region, country, state and district to articles."""
from __future__ import annotations

import re
from typing import Iterable, Optional, Pattern

from newshub.domain import Article, GeographyCatalog, Region
from newshub.domain.entities import INDIA, is_india

UNKNOWN_COUNTRY = "Unknown"

INDIAN_KEYWORDS: tuple[str, ...] = (
    "India",
    "Indian",
    "Bharat",
    "New Delhi",
    "Delhi",
    "Mumbai",
    "Bombay",
    "Bengaluru",
    "Bangalore",
    "Chennai",
    "Kolkata",
    "Hyderabad",
    "Pune",
    "Ahmedabad",
    "Jaipur",
    "Lucknow",
    "Kanpur",
    "Nagpur",
    "Patna",
    "Bhopal",
    "Chandigarh",
    "Guwahati",
    "Kochi",
    "Thiruvananthapuram",
    "Srinagar",
    "Maharashtra",
    "Karnataka",
    "Tamil Nadu",
    "Kerala",
    "Gujarat",
    "Rajasthan",
    "Uttar Pradesh",
    "Bihar",
    "West Bengal",
    "Punjab",
    "Telangana",
    "Andhra Pradesh",
    "Odisha",
    "Assam",
    "Madhya Pradesh",
    "Haryana",
    "Jharkhand",
    "Chhattisgarh",
    "Uttarakhand",
    "Himachal Pradesh",
    "Goa",
    "Jammu and Kashmir",
)


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    text = value.strip()
    return text or None


def _compile_keywords(keywords: Iterable[str]) -> Pattern[str]:
    # Longer names first so "New Delhi" wins over "Delhi".
    unique = sorted({word.strip() for word in keywords if word.strip()}, key=len, reverse=True)
    alternatives = "|".join(re.escape(word) for word in unique)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


class GeoClassifier:
    """Tags articles with geography from explicit hints or keyword heuristics.

    Precedence:

    1. An explicit region is used verbatim.
    2. India plus a known state yields ``district``.
    3. India alone yields ``domestic``.
    4. Any other known country yields ``international``.
    5. Otherwise title and description are scanned for Indian place names;
       a hit yields ``domestic`` and anything else ``international``.
    """

    def __init__(
        self,
        catalog: GeographyCatalog | None = None,
        keywords: Iterable[str] = INDIAN_KEYWORDS,
    ) -> None:
        words = list(keywords)
        if catalog is not None:
            words.extend(catalog.state_names())
        self._pattern = _compile_keywords(words)

    def mentions_india(self, article: Article) -> bool:
        text = f"{article.title} {article.description}"
        return bool(self._pattern.search(text))

    def classify(
        self,
        article: Article,
        region: Region | None = None,
        state: str | None = None,
        district: str | None = None,
        country: str | None = None,
    ) -> Article:
        country_value = _clean(country) or _clean(article.country)
        if country_value and country_value.lower() == UNKNOWN_COUNTRY.lower():
            country_value = None
        state_value = _clean(state) or _clean(article.state)
        district_value = _clean(district) or _clean(article.district)

        if region is not None:
            resolved = region
        elif is_india(country_value) and state_value:
            resolved = Region.DISTRICT
        elif is_india(country_value):
            resolved = Region.DOMESTIC
        elif country_value:
            resolved = Region.INTERNATIONAL
        elif self.mentions_india(article):
            resolved = Region.DOMESTIC
            country_value = INDIA
        else:
            resolved = Region.INTERNATIONAL

        return article.with_geography(
            resolved,
            country_value or UNKNOWN_COUNTRY,
            state_value,
            district_value,
        )


__all__ = ["GeoClassifier", "INDIAN_KEYWORDS", "UNKNOWN_COUNTRY"]
