"""Dependency container for newsletter sign-ups."""
from __future__ import annotations

from dataclasses import dataclass

from newshub.application import NewsletterService
from newshub.domain import SubscriptionRepository
from newshub.infrastructure.database import MongoClientFactory
from newshub.infrastructure.repositories import MongoSubscriptionRepository


@dataclass
class NewsletterContainer:
    """Container exposing newsletter service dependencies."""

    repository: SubscriptionRepository
    newsletter_service: NewsletterService


def build_newsletter_container(
    factory: MongoClientFactory | None = None,
    repository: SubscriptionRepository | None = None,
) -> NewsletterContainer:
    """Build the newsletter service container."""

    if repository is None:
        database = (factory or MongoClientFactory()).get_database()
        repository = MongoSubscriptionRepository(database["newsletter_subscriptions"])

    return NewsletterContainer(
        repository=repository,
        newsletter_service=NewsletterService(repository),
    )


__all__ = ["NewsletterContainer", "build_newsletter_container"]
