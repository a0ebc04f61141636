"""FastAPI routes serving aggregated news."""
from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from fastapi import APIRouter, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pymongo.errors import PyMongoError

from newshub.domain import Article, GeographyCatalog, NewsQuery, Region
from newshub.domain.entities import MAX_PAGE_SIZE
from newshub.services.news import NewsContainer

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
DEFAULT_TRENDING_LIMIT = 5
DEFAULT_RELATED_LIMIT = 3


class ArticleResponse(BaseModel):
    """Article as returned to the browser."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    image_url: str | None = None
    author: str
    #: ISO 8601 publication instant.
    published_at: str
    category: str
    source_url: str
    source: str
    region: str | None = None
    country: str | None = None
    state: str | None = None
    district: str | None = None


class PopularArticleResponse(ArticleResponse):
    """Article enriched with its recorded view count."""

    view_count: int = 0


class ViewRequest(BaseModel):
    """Notification that a reader opened an article."""

    url: str = Field(min_length=1)


class ViewResponse(BaseModel):
    url: str
    views: int


class StateResponse(BaseModel):
    name: str
    districts: list[str] = Field(default_factory=list)


class StatesResponse(BaseModel):
    states: list[StateResponse]


def coerce_int(value: Any, default: int, *, maximum: int | None = None) -> int:
    """Parse a positive integer, falling back to ``default`` silently."""

    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if maximum is not None:
        number = min(number, maximum)
    return number


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    text = value.strip()
    return text or None


def canonical_state(catalog: GeographyCatalog, state: str | None) -> str | None:
    """Spell a known state the way the catalog does; unknown names pass through."""

    if state is None:
        return None
    record = catalog.find_state(state)
    return record.name if record else state


def map_article_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article.to_payload())


def configure_cors(app: FastAPI) -> None:
    """Apply the default CORS configuration used by the services."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def include_routes(app: FastAPI, container: NewsContainer, *, prefix: str = "/api") -> None:
    """Register the news routes on ``app``."""

    router = APIRouter(prefix=prefix, tags=["News"])
    log = logging.getLogger("newshub.api")

    def run_query(action: Callable[[], T]) -> T:
        try:
            return action()
        except Exception as exc:
            log.exception("news request failed")
            raise HTTPException(
                status_code=500, detail=f"Failed to fetch news: {exc}"
            ) from exc

    @router.get("/news", response_model=list[ArticleResponse])
    def list_news(
        category: str | None = None,
        page: str | None = None,
        page_size: str | None = Query(default=None, alias="pageSize"),
        region: str | None = None,
        state: str | None = None,
        district: str | None = None,
        country: str | None = None,
    ) -> list[ArticleResponse]:
        """Aggregated articles for a category and optional geography."""

        query = NewsQuery(
            category=_clean(category) or "general",
            page=coerce_int(page, 1),
            page_size=coerce_int(page_size, DEFAULT_PAGE_SIZE, maximum=MAX_PAGE_SIZE),
            region=Region.parse(region),
            state=canonical_state(container.catalog, _clean(state)),
            district=_clean(district),
            country=_clean(country),
        )
        articles = run_query(lambda: container.feed_service.latest(query))
        return [map_article_response(article) for article in articles]

    @router.get("/news/trending", response_model=list[ArticleResponse])
    def trending_news(limit: str | None = None) -> list[ArticleResponse]:
        """Newest articles of the general aggregation."""

        count = coerce_int(limit, DEFAULT_TRENDING_LIMIT, maximum=MAX_PAGE_SIZE)
        articles = run_query(lambda: container.feed_service.trending(count))
        return [map_article_response(article) for article in articles]

    @router.get("/news/popular", response_model=list[PopularArticleResponse])
    def popular_news(limit: str | None = None) -> list[PopularArticleResponse]:
        """General articles ranked by recorded views."""

        count = coerce_int(limit, DEFAULT_TRENDING_LIMIT, maximum=MAX_PAGE_SIZE)
        ranked = run_query(lambda: container.feed_service.popular(count))
        return [
            PopularArticleResponse.model_validate(
                {**article.to_payload(), "viewCount": views}
            )
            for article, views in ranked
        ]

    @router.get("/news/related/{article_id}", response_model=list[ArticleResponse])
    def related_news(
        article_id: str,
        category: str | None = None,
        limit: str | None = None,
    ) -> list[ArticleResponse]:
        """Articles of the same category, skipping the one at ``article_id``."""

        count = coerce_int(limit, DEFAULT_RELATED_LIMIT, maximum=MAX_PAGE_SIZE)
        articles = run_query(
            lambda: container.feed_service.related(
                article_id, _clean(category) or "general", count
            )
        )
        return [map_article_response(article) for article in articles]

    @router.post("/news/views", response_model=ViewResponse)
    def record_view(payload: ViewRequest) -> ViewResponse:
        """Count one view of an article; feeds the popular ranking."""

        try:
            views = container.feed_service.record_view(payload.url)
        except RuntimeError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except PyMongoError as exc:
            log.warning("view counter unavailable: %s", exc)
            raise HTTPException(
                status_code=503, detail="View counter is unavailable"
            ) from exc
        return ViewResponse(url=payload.url, views=views)

    @router.get("/states", response_model=StatesResponse)
    def list_states() -> StatesResponse:
        """Indian states and districts for the location picker."""

        return StatesResponse.model_validate(container.catalog.to_mapping())

    @app.get("/newsdata.json", include_in_schema=False)
    def sample_dataset() -> list[dict]:
        return container.static_source.raw_payload

    app.include_router(router)


__all__ = [
    "ArticleResponse",
    "PopularArticleResponse",
    "StatesResponse",
    "ViewRequest",
    "ViewResponse",
    "canonical_state",
    "coerce_int",
    "configure_cors",
    "include_routes",
    "map_article_response",
]
