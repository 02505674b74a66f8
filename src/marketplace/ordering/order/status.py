"""Derivation of an order's status from the statuses of its items."""

from collections.abc import Iterable

from marketplace.ordering.cart.item import OrderItemStatus
from marketplace.ordering.order.order import OrderStatus

_W = OrderItemStatus.WAITING.value
_C = OrderItemStatus.CONFIRMED.value
_S = OrderItemStatus.SHIPPED.value
_D = OrderItemStatus.COMPLETED.value
_X = OrderItemStatus.CANCELED.value


def aggregate_status(item_statuses: Iterable[str]) -> str | None:
    """Map the set of item statuses to an order status.

    Rules, first match wins:

        all Completed                -> Delivered
        all in {Shipped, Completed}  -> Shipped
        all Waiting                  -> Pending
        all in {Confirmed, Waiting}  -> Confirmed
        all Canceled                 -> Canceled
        anything else                -> Processing

    The all-Waiting rule is evaluated ahead of {Confirmed, Waiting}, which
    would otherwise absorb it. Returns None for an order without items.
    """
    statuses = {s.value if isinstance(s, OrderItemStatus) else s for s in item_statuses}
    if not statuses:
        return None

    if statuses == {_D}:
        return OrderStatus.DELIVERED.value
    if statuses <= {_S, _D}:
        return OrderStatus.SHIPPED.value
    if statuses == {_W}:
        return OrderStatus.PENDING.value
    if statuses <= {_C, _W}:
        return OrderStatus.CONFIRMED.value
    if statuses == {_X}:
        return OrderStatus.CANCELED.value
    return OrderStatus.PROCESSING.value
