"""Recomputation of an order's derived status."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.items import items_of_order
from marketplace.ordering.order.order import Order
from marketplace.ordering.order.status import aggregate_status


@marketplace.command(part_of="Order")
class RecalculateOrderStatus:
    order_id: Identifier(required=True)


def recalculate_order_status(order_id, updated_item=None):
    """Derive and store the order status from its items.

    `updated_item` is a freshly modified item not yet committed; it replaces
    the stored copy when the siblings are read. An order without items is
    left untouched. Returns the order's status after recomputation.
    """
    repo = current_domain.repository_for(Order)
    order = repo.get(order_id)

    items = {str(i.id): i for i in items_of_order(order_id)}
    if updated_item is not None and str(updated_item.order_id) == str(order_id):
        items[str(updated_item.id)] = updated_item

    if order.apply_derived_status(aggregate_status(i.status for i in items.values())):
        repo.add(order)
    return order.status


@marketplace.command_handler(part_of=Order)
class RecalculateOrderStatusHandler:
    @handle(RecalculateOrderStatus)
    def recalculate(self, command):
        return recalculate_order_status(command.order_id)
