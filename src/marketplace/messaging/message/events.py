"""Domain events for the ChatMessage aggregate."""

from protean.fields import DateTime, Identifier

from marketplace.domain import marketplace


@marketplace.event(part_of="ChatMessage")
class MessageSent:
    """A user sent a message to another user."""

    __version__ = 1

    message_id = Identifier(required=True)
    sender_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    product_id = Identifier()
    sent_at = DateTime(required=True)


@marketplace.event(part_of="ChatMessage")
class MessageRead:
    """The receiver opened a message."""

    __version__ = 1

    message_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    read_at = DateTime(required=True)
