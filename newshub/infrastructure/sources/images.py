"""Image lookup strategies for RSS entries.

Each extractor receives a parsed feed entry and returns a raw candidate URL
or ``None``. :func:`extract_image` walks the strategies in order and keeps
the first candidate that normalizes to an absolute ``http(s)`` URL.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Sequence

from bs4 import BeautifulSoup

from .normalization import absolute_image_url

ImageExtractor = Callable[[Mapping[str, Any]], Optional[str]]

_BACKGROUND_IMAGE_RE = re.compile(
    r"background(?:-image)?\s*:[^;\"'>]*?url\(\s*['\"]?([^'\")\s]+)['\"]?\s*\)",
    re.IGNORECASE,
)


def _as_list(value: Any) -> list:
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _content_values(entry: Mapping[str, Any]) -> Iterator[str]:
    for block in _as_list(entry.get("content")):
        value = block.get("value") if isinstance(block, Mapping) else block
        if value:
            yield str(value)


def _snippet_values(entry: Mapping[str, Any]) -> Iterator[str]:
    for key in ("summary", "description"):
        value = entry.get(key)
        if value:
            yield str(value)


def _first_img_src(fragments: Iterable[str]) -> Optional[str]:
    for fragment in fragments:
        if "<img" not in fragment.lower():
            continue
        soup = BeautifulSoup(fragment, "html.parser")
        for tag in soup.find_all("img"):
            src = tag.get("src")
            if src and str(src).strip():
                return str(src).strip()
    return None


def from_enclosures(entry: Mapping[str, Any]) -> Optional[str]:
    """Enclosures (or ``rel=enclosure`` links) declared with an image MIME type."""

    candidates = _as_list(entry.get("enclosures")) + [
        link
        for link in _as_list(entry.get("links"))
        if isinstance(link, Mapping) and link.get("rel") == "enclosure"
    ]
    for enclosure in candidates:
        if not isinstance(enclosure, Mapping):
            continue
        mime = str(enclosure.get("type") or "").lower()
        url = enclosure.get("href") or enclosure.get("url")
        if mime.startswith("image/") and url:
            return str(url)
    return None


def from_media_content(entry: Mapping[str, Any]) -> Optional[str]:
    """``media:content`` items that are not declared as another medium."""

    for media in _as_list(entry.get("media_content")):
        if not isinstance(media, Mapping) or not media.get("url"):
            continue
        medium = str(media.get("medium") or "").lower()
        mime = str(media.get("type") or "").lower()
        if medium and medium != "image":
            continue
        if mime and not mime.startswith("image/"):
            continue
        return str(media["url"])
    return None


def from_media_thumbnail(entry: Mapping[str, Any]) -> Optional[str]:
    for media in _as_list(entry.get("media_thumbnail")):
        if isinstance(media, Mapping) and media.get("url"):
            return str(media["url"])
    return None


def from_content_img(entry: Mapping[str, Any]) -> Optional[str]:
    return _first_img_src(_content_values(entry))


def from_snippet_img(entry: Mapping[str, Any]) -> Optional[str]:
    return _first_img_src(_snippet_values(entry))


def from_background_image(entry: Mapping[str, Any]) -> Optional[str]:
    """CSS ``background-image: url(...)`` declarations in content or snippet."""

    for fragment in list(_content_values(entry)) + list(_snippet_values(entry)):
        match = _BACKGROUND_IMAGE_RE.search(fragment)
        if match:
            return match.group(1)
    return None


DEFAULT_EXTRACTORS: Sequence[ImageExtractor] = (
    from_enclosures,
    from_media_content,
    from_media_thumbnail,
    from_content_img,
    from_snippet_img,
    from_background_image,
)


def extract_image(
    entry: Mapping[str, Any],
    base: str | None = None,
    extractors: Sequence[ImageExtractor] = DEFAULT_EXTRACTORS,
) -> Optional[str]:
    """Return the first usable image URL, resolved against ``base`` if relative."""

    for extractor in extractors:
        url = absolute_image_url(extractor(entry), base)
        if url:
            return url
    return None


__all__ = [
    "DEFAULT_EXTRACTORS",
    "ImageExtractor",
    "extract_image",
    "from_background_image",
    "from_content_img",
    "from_enclosures",
    "from_media_content",
    "from_media_thumbnail",
    "from_snippet_img",
]
