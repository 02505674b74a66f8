"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    """A buyer checked out their cart into a new order."""

    __version__ = 1

    order_id: Identifier(required=True)
    buyer_id: Identifier(required=True)
    total_amount: Float(required=True)
    item_count: Integer(required=True)
    placed_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderStatusChanged:
    """The derived status of an order moved after one of its items changed."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
