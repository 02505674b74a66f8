"""Read-side views over orders: buyer history, seller view and order detail."""

from dataclasses import dataclass, field

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from marketplace.ordering.cart.item import OrderItem
from marketplace.ordering.cart.items import items_of_order
from marketplace.ordering.order.order import Order
from marketplace.shared.errors import AccessDenied


@dataclass
class OrderView:
    order: Order
    items: list[OrderItem] = field(default_factory=list)


def _newest_first(views):
    return sorted(views, key=lambda v: v.order.created_at, reverse=True)


def orders_for_buyer(buyer_id) -> list[OrderView]:
    orders = current_domain.repository_for(Order)._dao.query.filter(buyer_id=str(buyer_id)).limit(None).all().items
    return _newest_first(OrderView(order=o, items=items_of_order(o.id)) for o in orders)


def orders_for_seller(seller_id) -> list[OrderView]:
    """Orders with at least one item of the seller, pruned to that seller's items."""
    sold = current_domain.repository_for(OrderItem)._dao.query.filter(seller_id=str(seller_id)).limit(None).all().items

    by_order: dict[str, list[OrderItem]] = {}
    for item in sold:
        if item.order_id is not None:
            by_order.setdefault(str(item.order_id), []).append(item)

    repo = current_domain.repository_for(Order)
    views = []
    for order_id, items in by_order.items():
        views.append(OrderView(order=repo.get(order_id), items=sorted(items, key=lambda i: i.added_at)))
    return _newest_first(views)


def order_for_buyer(order_id, buyer_id) -> OrderView:
    """A single order, visible only to its buyer. A missing order is reported as forbidden."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise AccessDenied("You cannot view this order") from None

    if str(order.buyer_id) != str(buyer_id):
        raise AccessDenied("You cannot view this order")

    return OrderView(order=order, items=items_of_order(order.id))
