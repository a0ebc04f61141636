"""Port for the per-article view counter used to rank popular news."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable


class ArticleViewCounter(ABC):
    """Stores how many times each article URL was opened."""

    @abstractmethod
    def record_view(self, url: str) -> int:
        """Increment the counter for ``url`` and return the new total."""

    @abstractmethod
    def counts_for(self, urls: Iterable[str]) -> Dict[str, int]:
        """Return the known totals for ``urls``; missing URLs are omitted."""
