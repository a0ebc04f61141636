"""View counter stored in a MongoDB collection."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable

from pymongo import ReturnDocument
from pymongo.collection import Collection

from newshub.domain.ports import ArticleViewCounter


class MongoArticleViewCounter(ArticleViewCounter):
    """Keeps one ``{url, views, last_viewed_at}`` document per article."""

    def __init__(self, collection: Collection) -> None:
        """Bind the counter to ``collection``.

        Parameters
        ----------
        collection:
            MongoDB collection holding one document per article URL.
        """

        self._collection: Collection = collection

    def record_view(self, url: str) -> int:
        document = self._collection.find_one_and_update(
            {"url": url},
            {
                "$inc": {"views": 1},
                "$set": {"last_viewed_at": datetime.now(timezone.utc)},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int((document or {}).get("views", 1))

    def counts_for(self, urls: Iterable[str]) -> Dict[str, int]:
        wanted = [url for url in dict.fromkeys(urls) if url]
        if not wanted:
            return {}
        counts: Dict[str, int] = {}
        for document in self._collection.find(
            {"url": {"$in": wanted}}, {"url": 1, "views": 1}
        ):
            counts[document["url"]] = int(document.get("views", 0))
        return counts


__all__ = ["MongoArticleViewCounter"]
