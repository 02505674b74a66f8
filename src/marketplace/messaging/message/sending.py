"""Sending and reading messages: commands and handler."""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.identity.account import Account
from marketplace.messaging.message.message import ChatMessage
from marketplace.shared.errors import AccessDenied


@marketplace.command(part_of="ChatMessage")
class SendMessage:
    sender_id = Identifier(required=True)
    receiver_id = Identifier(required=True)
    content = Text(required=True)
    product_id = Identifier()


@marketplace.command(part_of="ChatMessage")
class MarkMessageRead:
    reader_id = Identifier(required=True)
    message_id = Identifier(required=True)


@marketplace.command_handler(part_of=ChatMessage)
class MessagingHandler:
    @handle(SendMessage)
    def send_message(self, command):
        current_domain.repository_for(Account).get(command.receiver_id)
        if command.product_id:
            current_domain.repository_for(Product).get(command.product_id)

        message = ChatMessage.send(
            sender_id=command.sender_id,
            receiver_id=command.receiver_id,
            content=command.content,
            product_id=command.product_id,
        )
        current_domain.repository_for(ChatMessage).add(message)
        return str(message.id)

    @handle(MarkMessageRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(ChatMessage)
        message = repo.get(command.message_id)

        if str(message.receiver_id) != str(command.reader_id):
            raise AccessDenied("Only the receiver can mark a message as read")

        message.mark_read()
        repo.add(message)
