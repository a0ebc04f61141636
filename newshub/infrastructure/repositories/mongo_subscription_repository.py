"""Newsletter subscriptions persisted in MongoDB."""
from __future__ import annotations

from datetime import datetime, timezone

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from newshub.domain.ports import SubscriptionRepository


class MongoSubscriptionRepository(SubscriptionRepository):
    """Stores one document per subscribed e-mail address."""

    def __init__(self, collection: Collection) -> None:
        self._collection: Collection = collection
        self._index_ready = False

    def add(self, email: str) -> bool:
        self._ensure_index()
        normalized = email.strip().lower()
        try:
            result = self._collection.update_one(
                {"email": normalized},
                {
                    "$setOnInsert": {
                        "email": normalized,
                        "subscribed_at": datetime.now(timezone.utc),
                    }
                },
                upsert=True,
            )
        except DuplicateKeyError:
            return False
        return result.upserted_id is not None

    def _ensure_index(self) -> None:
        if self._index_ready:
            return
        self._collection.create_index("email", unique=True)
        self._index_ready = True


__all__ = ["MongoSubscriptionRepository"]
