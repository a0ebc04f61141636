"""Shared settings loaded from environment variables."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8000
_DEFAULT_FEED_TIMEOUT = 5.0
_DEFAULT_API_TIMEOUT = 10.0
_DATA_DIR = Path(__file__).resolve().parent / "data"


def _optional(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


def _float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Port exposed by the aggregated API."""

    return int(os.getenv("NEWSHUB_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Host Uvicorn listens on."""

    return os.getenv("NEWSHUB_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_news_api_key() -> str | None:
    """Key for the NewsAPI headline provider; ``None`` disables that tier."""

    return _optional("NEWS_API_KEY")


@lru_cache(maxsize=None)
def get_gnews_api_key() -> str | None:
    """Key for the GNews headline provider; ``None`` disables that tier."""

    return _optional("GNEWS_API_KEY")


@lru_cache(maxsize=None)
def get_feed_timeout() -> float:
    """Seconds allowed for a single RSS feed download."""

    return _float("NEWSHUB_FEED_TIMEOUT", _DEFAULT_FEED_TIMEOUT)


@lru_cache(maxsize=None)
def get_api_timeout() -> float:
    """Seconds allowed for a headline API request."""

    return _float("NEWSHUB_API_TIMEOUT", _DEFAULT_API_TIMEOUT)


@lru_cache(maxsize=None)
def get_dataset_path() -> Path:
    """Location of the static fallback dataset."""

    return Path(os.getenv("NEWSHUB_DATASET_PATH", _DATA_DIR / "newsdata.json"))


@lru_cache(maxsize=None)
def get_geography_path() -> Path:
    """Location of the Indian states/districts reference file."""

    return Path(os.getenv("NEWSHUB_GEOGRAPHY_PATH", _DATA_DIR / "indian_states.json"))


def get_log_level() -> str:
    return os.getenv("NEWSHUB_LOG_LEVEL", "INFO")


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_api_timeout",
    "get_dataset_path",
    "get_feed_timeout",
    "get_geography_path",
    "get_gnews_api_key",
    "get_log_level",
    "get_news_api_key",
]
