"""Conversation views: direct conversations, product chats and seller threads."""

from dataclasses import dataclass
from datetime import datetime

from protean.utils.globals import current_domain

from marketplace.catalogue.browsing import products_of_seller
from marketplace.messaging.message.message import ChatMessage
from marketplace.shared.access import Principal, require_participant


@dataclass
class Thread:
    """The latest state of a buyer's conversation with a seller about one product."""

    product_id: str
    product_name: str
    buyer_id: str
    last_message: str
    last_date: datetime
    unread_count: int = 0


def _dao():
    return current_domain.repository_for(ChatMessage)._dao


def _chronological(messages):
    return sorted(messages, key=lambda m: m.sent_at)


def _between(user_id, other_id):
    sent = _dao().query.filter(sender_id=str(user_id), receiver_id=str(other_id)).limit(None).all().items
    received = _dao().query.filter(sender_id=str(other_id), receiver_id=str(user_id)).limit(None).all().items
    return sent + received


def conversation_with(user_id, other_id, product_id=None):
    """Messages exchanged between two users in both directions, oldest first."""
    if product_id:
        about_product = _dao().query.filter(product_id=str(product_id)).limit(None).all().items
        return _chronological(m for m in about_product if m.involves(user_id, other_id))
    return _chronological(_between(user_id, other_id))


def product_chat(principal: Principal, buyer_id, seller_id, product_id):
    """The buyer/seller conversation about one product; only its participants may read it."""
    require_participant(principal, buyer_id, seller_id)
    return conversation_with(buyer_id, seller_id, product_id=product_id)


def seller_threads(seller_id) -> list[Thread]:
    """One thread per (product, buyer) over the seller's products, latest activity first."""
    threads = []
    for product in products_of_seller(seller_id):
        by_buyer: dict[str, list[ChatMessage]] = {}
        for message in _dao().query.filter(product_id=str(product.id)).limit(None).all().items:
            if str(seller_id) not in (str(message.sender_id), str(message.receiver_id)):
                continue
            buyer_id = str(message.receiver_id if str(message.sender_id) == str(seller_id) else message.sender_id)
            by_buyer.setdefault(buyer_id, []).append(message)

        for buyer_id, messages in by_buyer.items():
            last = max(messages, key=lambda m: m.sent_at)
            threads.append(
                Thread(
                    product_id=str(product.id),
                    product_name=product.name,
                    buyer_id=buyer_id,
                    last_message=last.content,
                    last_date=last.sent_at,
                    unread_count=sum(1 for m in messages if str(m.receiver_id) == str(seller_id) and not m.is_read),
                )
            )

    return sorted(threads, key=lambda t: t.last_date, reverse=True)
