"""Newsletter service dependency container."""

from .container import NewsletterContainer, build_newsletter_container

__all__ = ["NewsletterContainer", "build_newsletter_container"]
