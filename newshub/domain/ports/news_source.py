"""Port implemented by every upstream news source."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from newshub.domain.entities import Article, NewsQuery


class NewsSource(ABC):
    """Converts a source-specific payload into normalized articles."""

    #: Short name used in logs and as the author fallback.
    name: str = "source"

    @abstractmethod
    def fetch(self, query: NewsQuery) -> List[Article]:
        """Return articles for the query, or an empty list when the source fails.

        Implementations log their own errors instead of raising them.
        """
