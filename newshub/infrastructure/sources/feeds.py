"""Static registry of RSS feeds per news category."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class FeedSpec:
    """A single RSS/Atom feed and the outlet that publishes it."""

    name: str
    url: str


FeedRegistry = Dict[str, Tuple[FeedSpec, ...]]

FEED_REGISTRY: FeedRegistry = {
    "technology": (
        FeedSpec("Gadgets 360", "https://feeds.feedburner.com/gadgets360-latest"),
        FeedSpec(
            "The Hindu Technology",
            "https://www.thehindu.com/sci-tech/technology/feeder/default.rss",
        ),
        FeedSpec("TechCrunch", "https://techcrunch.com/feed/"),
    ),
    "science": (
        FeedSpec(
            "The Hindu Science",
            "https://www.thehindu.com/sci-tech/science/feeder/default.rss",
        ),
        FeedSpec("ScienceDaily", "https://www.sciencedaily.com/rss/all.xml"),
        FeedSpec("New Scientist", "https://www.newscientist.com/feed/home/"),
    ),
    "business": (
        FeedSpec(
            "The Economic Times",
            "https://economictimes.indiatimes.com/rssfeedstopstories.cms",
        ),
        FeedSpec(
            "The Hindu Business", "https://www.thehindu.com/business/feeder/default.rss"
        ),
        FeedSpec("BBC Business", "https://feeds.bbci.co.uk/news/business/rss.xml"),
    ),
    "health": (
        FeedSpec(
            "The Hindu Health",
            "https://www.thehindu.com/sci-tech/health/feeder/default.rss",
        ),
        FeedSpec("BBC Health", "https://feeds.bbci.co.uk/news/health/rss.xml"),
        FeedSpec(
            "Medical News Today",
            "https://rss.medicalnewstoday.com/featurednews.xml",
        ),
    ),
    "entertainment": (
        FeedSpec(
            "The Hindu Entertainment",
            "https://www.thehindu.com/entertainment/feeder/default.rss",
        ),
        FeedSpec(
            "BBC Entertainment",
            "https://feeds.bbci.co.uk/news/entertainment_and_arts/rss.xml",
        ),
        FeedSpec("Variety", "https://variety.com/feed/"),
    ),
    "sports": (
        FeedSpec("The Hindu Sport", "https://www.thehindu.com/sport/feeder/default.rss"),
        FeedSpec("BBC Sport", "https://feeds.bbci.co.uk/sport/rss.xml"),
        FeedSpec("ESPN", "https://www.espn.com/espn/rss/news"),
    ),
    "general": (
        FeedSpec("NDTV", "https://feeds.feedburner.com/ndtvnews-top-stories"),
        FeedSpec(
            "The Hindu National",
            "https://www.thehindu.com/news/national/feeder/default.rss",
        ),
        FeedSpec("BBC World", "https://feeds.bbci.co.uk/news/world/rss.xml"),
    ),
}


__all__ = ["FEED_REGISTRY", "FeedRegistry", "FeedSpec"]
