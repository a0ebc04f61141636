"""Mongo database utilities."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient


def get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise RuntimeError(f"Environment variable '{name}' is not set")
    return value


@dataclass
class MongoSettings:
    uri: str
    database: str
    timeout_ms: int = 2000

    @classmethod
    def from_env(cls) -> "MongoSettings":
        uri = get_env("MONGO_URI", "mongodb://localhost:27017")
        database = get_env("MONGO_DATABASE", "newshub")
        try:
            timeout_ms = int(get_env("MONGO_TIMEOUT_MS", "2000"))
        except ValueError:
            timeout_ms = 2000
        return cls(uri=uri, database=database, timeout_ms=timeout_ms)


class MongoClientFactory:
    """Creates Mongo clients lazily; no connection is opened until first use."""

    def __init__(self, settings: MongoSettings | None = None) -> None:
        self._settings = settings or MongoSettings.from_env()
        self._client: MongoClient | None = None

    def create_client(self) -> MongoClient:
        if not self._client:
            self._client = MongoClient(
                self._settings.uri,
                serverSelectionTimeoutMS=self._settings.timeout_ms,
            )
        return self._client

    def get_database(self) -> Any:
        client = self.create_client()
        return client[self._settings.database]


__all__ = ["MongoClientFactory", "MongoSettings", "get_env"]
