"""Messaging API package."""

from marketplace.messaging.api.routes import message_router

__all__ = ["message_router"]
