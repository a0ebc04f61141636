"""Newsletter sign-up."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from newshub.domain import SubscriptionRepository

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email.strip()))


@dataclass(slots=True)
class SubscriptionResult:
    """Outcome of a sign-up attempt."""

    email: str
    created: bool


class NewsletterService:
    """Validates addresses and stores new subscriptions."""

    def __init__(self, repository: SubscriptionRepository) -> None:
        self._repository = repository
        self._log = logging.getLogger("newshub.newsletter")

    def subscribe(self, email: str) -> SubscriptionResult:
        """Subscribe ``email``.

        Raises:
            ValueError: When the address is malformed.
        """

        normalized = (email or "").strip().lower()
        if not is_valid_email(normalized):
            raise ValueError("Please enter a valid email address")
        created = self._repository.add(normalized)
        if created:
            self._log.info("new newsletter subscriber")
        return SubscriptionResult(email=normalized, created=created)


__all__ = ["NewsletterService", "SubscriptionResult", "is_valid_email"]
