"""Reviews API package."""

from marketplace.reviews.api.routes import review_router

__all__ = ["review_router"]
