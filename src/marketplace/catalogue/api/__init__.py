"""Catalogue API package."""

from marketplace.catalogue.api.routes import category_router, product_router, user_category_router

__all__ = ["category_router", "product_router", "user_category_router"]
