"""REST entry point combining the NewsHub services."""
from __future__ import annotations

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

from newshub.services.news import build_news_container
from newshub.services.news.api import (
    configure_cors as configure_default_cors,
    include_routes as include_news_routes,
)
from newshub.services.newsletter import build_newsletter_container
from newshub.services.newsletter.api import include_routes as include_newsletter_routes
from newshub.settings import get_api_bind_host, get_api_port


def create_app() -> FastAPI:
    """Create the FastAPI application with every service route configured."""

    news_container = build_news_container()
    newsletter_container = build_newsletter_container()

    app = FastAPI(
        title="NewsHub API",
        version="1.0.0",
        description=(
            "Aggregates RSS feeds, headline APIs and a bundled dataset into a "
            "single categorized and geotagged news feed."
        ),
    )
    configure_default_cors(app)
    include_news_routes(app, news_container)
    include_newsletter_routes(app, newsletter_container)
    return app


def run() -> None:
    """Serve the aggregated API with Uvicorn."""

    load_dotenv()
    uvicorn.run(
        "newshub.api:create_app",
        host=get_api_bind_host(),
        port=get_api_port(),
        factory=True,
    )


__all__ = ["create_app", "run"]
