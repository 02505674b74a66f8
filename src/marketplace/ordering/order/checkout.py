"""Checkout: turns a buyer's cart into an order.

Checkouts of the same buyer are serialized: the guard is held across the
whole command, including the unit-of-work commit, and the cart is read inside
it. A second checkout racing the first therefore finds an empty cart and is
rejected instead of splitting or duplicating items.
"""

import threading
import weakref

import structlog
from protean import handle
from protean.exceptions import InvalidOperationError, ObjectNotFoundError
from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.cart.item import OrderItem
from marketplace.ordering.cart.items import cart_of
from marketplace.ordering.order.order import Order

logger = structlog.get_logger(__name__)

# A buyer's lock lives only while some checkout holds a reference to it
_guards: weakref.WeakValueDictionary[str, threading.Lock] = weakref.WeakValueDictionary()
_guards_lock = threading.Lock()


def buyer_guard(buyer_id) -> threading.Lock:
    with _guards_lock:
        return _guards.setdefault(str(buyer_id), threading.Lock())


@marketplace.command(part_of="Order")
class Checkout:
    buyer_id: Identifier(required=True)
    shipping_address: Text(required=True)
    total_amount: Float(min_value=0.0)


def _current_seller(product_repo, item):
    try:
        return product_repo.get(item.product_id).seller_id
    except ObjectNotFoundError:
        return item.seller_id


@marketplace.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        items = cart_of(command.buyer_id)
        if not items:
            raise InvalidOperationError("Cannot check out an empty cart")

        total = command.total_amount
        if total is None:
            total = round(sum(i.line_total for i in items), 2)

        order = Order.place(
            buyer_id=command.buyer_id,
            shipping_address=command.shipping_address,
            total_amount=total,
            item_count=len(items),
        )
        current_domain.repository_for(Order).add(order)

        product_repo = current_domain.repository_for(Product)
        item_repo = current_domain.repository_for(OrderItem)
        for item in items:
            item.attach_to_order(order.id, _current_seller(product_repo, item))
            item_repo.add(item)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            buyer_id=str(command.buyer_id),
            item_count=len(items),
            total_amount=total,
        )
        return str(order.id)


def checkout_cart(buyer_id, shipping_address, total_amount=None) -> str:
    """Check out the buyer's cart under the buyer's guard. Returns the order id."""
    with buyer_guard(buyer_id):
        return current_domain.process(
            Checkout(
                buyer_id=buyer_id,
                shipping_address=shipping_address,
                total_amount=total_amount,
            ),
            asynchronous=False,
        )
