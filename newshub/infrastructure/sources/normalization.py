"""Helpers that normalize text, URLs and dates coming from upstream sources."""
from __future__ import annotations

import re
import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional
from urllib.parse import urljoin, urlsplit

from bs4 import BeautifulSoup

DESCRIPTION_MAX_LENGTH = 200

_COLLAPSE_WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)
# NewsAPI appends "[+1234 chars]" to truncated content.
_TRUNCATION_MARKER_RE = re.compile(r"\s*\[\+\d+ chars\]\s*$")
_UNUSABLE_TITLES = {"[removed]"}


def collapse_whitespace(value: str) -> str:
    return _COLLAPSE_WHITESPACE_RE.sub(" ", value).strip()


def strip_html(value: Any) -> str:
    """Return the visible text of an HTML fragment."""

    if not value:
        return ""
    text = str(value)
    if "<" in text and ">" in text:
        text = BeautifulSoup(text, "html.parser").get_text(" ", strip=True)
    return collapse_whitespace(text)


def truncate(value: str, limit: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Cut ``value`` to ``limit`` characters on a word boundary."""

    if len(value) <= limit:
        return value
    cut = value[:limit].rsplit(" ", 1)[0].rstrip(" ,.;:")
    return f"{cut or value[:limit]}..."


def build_description(*candidates: Any) -> str:
    """Pick the first non-empty candidate, strip markup and truncate it."""

    for candidate in candidates:
        text = _TRUNCATION_MARKER_RE.sub("", strip_html(candidate))
        if text:
            return truncate(text)
    return ""


def usable_title(value: Any) -> Optional[str]:
    """Return the cleaned title or ``None`` when it cannot be shown."""

    title = strip_html(value)
    if not title or title.lower() in _UNUSABLE_TITLES:
        return None
    return title


def origin_of(url: str) -> str:
    """``scheme://host`` part of ``url``."""

    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"


def absolute_image_url(value: Any, base: str | None = None) -> Optional[str]:
    """Validate an image address, resolving relative paths against ``base``.

    Only ``http`` and ``https`` URLs with a host are accepted; anything else
    (``data:`` URIs, bare relative paths without a base) yields ``None``.
    """

    if not value:
        return None
    url = str(value).strip()
    if not url:
        return None
    if url.startswith("//"):
        url = f"https:{url}"
    elif not urlsplit(url).scheme and base:
        url = urljoin(base.rstrip("/") + "/", url)
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    return url


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse ISO 8601, RFC 822 or ``time.struct_time`` values into UTC."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, time.struct_time):
        parsed = datetime(*value[:6], tzinfo=timezone.utc)
    else:
        text = str(value).strip()
        parsed = None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            try:
                parsed = parsedate_to_datetime(text)
            except (TypeError, ValueError, IndexError):
                return None
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def timestamp_or_now(*values: Any) -> datetime:
    for value in values:
        parsed = parse_timestamp(value)
        if parsed is not None:
            return parsed
    return utcnow()


__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "absolute_image_url",
    "build_description",
    "collapse_whitespace",
    "origin_of",
    "parse_timestamp",
    "strip_html",
    "timestamp_or_now",
    "truncate",
    "usable_title",
    "utcnow",
]
