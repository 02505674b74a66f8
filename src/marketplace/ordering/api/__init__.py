"""Ordering API package."""

from marketplace.ordering.api.routes import order_item_router, order_router

__all__ = ["order_item_router", "order_router"]
