"""Identity API package."""

from marketplace.identity.api.routes import router

__all__ = ["router"]
