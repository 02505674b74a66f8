"""ChatMessage aggregate: a direct message between two users."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Text

from marketplace.domain import marketplace
from marketplace.messaging.message.events import MessageRead, MessageSent


@marketplace.aggregate
class ChatMessage:
    """A message from one user to another, optionally about a product."""

    sender_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    content = Text(required=True)
    product_id = Identifier()
    sent_at = DateTime(default=lambda: datetime.now(UTC))
    is_read = Boolean(default=False)
    read_at = DateTime()

    @classmethod
    def send(cls, sender_id, receiver_id, content, product_id=None):
        if str(sender_id) == str(receiver_id):
            raise ValidationError({"receiver_id": ["Cannot send a message to yourself"]})
        if not content or not content.strip():
            raise ValidationError({"content": ["Message cannot be blank"]})

        now = datetime.now(UTC)
        message = cls(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            product_id=product_id,
            sent_at=now,
            is_read=False,
        )
        message.raise_(
            MessageSent(
                message_id=message.id,
                sender_id=sender_id,
                receiver_id=receiver_id,
                product_id=product_id,
                sent_at=now,
            )
        )
        return message

    def mark_read(self):
        if self.is_read:
            return

        now = datetime.now(UTC)
        self.is_read = True
        self.read_at = now
        self.raise_(MessageRead(message_id=self.id, receiver_id=self.receiver_id, read_at=now))

    def involves(self, user_id, other_id) -> bool:
        pair = {str(self.sender_id), str(self.receiver_id)}
        return pair == {str(user_id), str(other_id)}
