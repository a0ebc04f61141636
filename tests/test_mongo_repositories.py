"""Tests for the MongoDB-backed view counter and subscription store."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from pymongo.errors import DuplicateKeyError

from newshub.infrastructure.repositories import (
    MongoArticleViewCounter,
    MongoSubscriptionRepository,
)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []
        self.indexes: list[tuple[str, bool]] = []

    def _find_one(self, criteria: dict[str, Any]) -> dict[str, Any] | None:
        for document in self.documents:
            if all(document.get(key) == value for key, value in criteria.items()):
                return document
        return None

    def find_one_and_update(self, criteria, update, upsert=False, return_document=None):
        document = self._find_one(criteria)
        if document is None:
            if not upsert:
                return None
            document = dict(criteria)
            self.documents.append(document)
        for field, amount in update.get("$inc", {}).items():
            document[field] = document.get(field, 0) + amount
        document.update(update.get("$set", {}))
        return dict(document)

    def find(self, criteria, projection=None):
        wanted = criteria["url"]["$in"]
        return [dict(document) for document in self.documents if document["url"] in wanted]

    def create_index(self, field: str, unique: bool = False) -> str:
        self.indexes.append((field, unique))
        return f"{field}_1"

    def update_one(self, criteria, update, upsert=False):
        if self._find_one(criteria) is not None:
            return SimpleNamespace(upserted_id=None, matched_count=1)
        document = dict(update.get("$setOnInsert", {}))
        self.documents.append(document)
        return SimpleNamespace(upserted_id=len(self.documents), matched_count=0)


class _RacingCollection(FakeCollection):
    def update_one(self, criteria, update, upsert=False):
        raise DuplicateKeyError("E11000 duplicate key error")


def test_record_view_increments_and_counts_for_reads_totals() -> None:
    collection = FakeCollection()
    counter = MongoArticleViewCounter(collection)

    assert counter.record_view("https://example.com/a") == 1
    assert counter.record_view("https://example.com/a") == 2
    assert counter.record_view("https://example.com/b") == 1

    counts = counter.counts_for(
        ["https://example.com/a", "https://example.com/b", "https://example.com/c"]
    )

    assert counts == {"https://example.com/a": 2, "https://example.com/b": 1}
    assert "last_viewed_at" in collection.documents[0]


def test_counts_for_empty_input_skips_the_query() -> None:
    assert MongoArticleViewCounter(FakeCollection()).counts_for([]) == {}


def test_subscription_is_created_once_per_address() -> None:
    collection = FakeCollection()
    repository = MongoSubscriptionRepository(collection)

    assert repository.add("Reader@Example.com") is True
    assert repository.add("reader@example.com") is False
    assert collection.documents[0]["email"] == "reader@example.com"
    assert collection.indexes == [("email", True)]


def test_duplicate_key_race_counts_as_existing() -> None:
    assert MongoSubscriptionRepository(_RacingCollection()).add("a@b.co") is False
