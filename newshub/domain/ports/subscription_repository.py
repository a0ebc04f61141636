"""Persistence contract for newsletter subscriptions."""
from __future__ import annotations

from abc import ABC, abstractmethod


class SubscriptionRepository(ABC):
    """Keeps the list of e-mail addresses subscribed to the newsletter."""

    @abstractmethod
    def add(self, email: str) -> bool:
        """Store ``email``; return ``False`` when it was already subscribed."""
