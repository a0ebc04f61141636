"""FastAPI routes for newsletter sign-ups."""
from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from newshub.services.newsletter import NewsletterContainer


class SubscribeRequest(BaseModel):
    email: str = ""


class SubscribeResponse(BaseModel):
    success: bool
    message: str


def include_routes(
    app: FastAPI, container: NewsletterContainer, *, prefix: str = "/api"
) -> None:
    """Register the newsletter routes on ``app``."""

    router = APIRouter(prefix=prefix, tags=["Newsletter"])
    log = logging.getLogger("newshub.api")

    @router.post(
        "/newsletter/subscribe", response_model=SubscribeResponse, status_code=201
    )
    def subscribe(payload: SubscribeRequest) -> SubscribeResponse:
        try:
            result = container.newsletter_service.subscribe(payload.email)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except PyMongoError as exc:
            log.warning("subscription store unavailable: %s", exc)
            raise HTTPException(
                status_code=503, detail="Newsletter service is unavailable"
            ) from exc
        if not result.created:
            raise HTTPException(status_code=400, detail="Email already subscribed")
        return SubscribeResponse(success=True, message="Successfully subscribed!")

    app.include_router(router)


__all__ = ["SubscribeRequest", "SubscribeResponse", "include_routes"]
