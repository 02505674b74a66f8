"""Order aggregate: created at checkout, its status derived from its items."""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.ordering.order.events import OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELED = "Canceled"
    PROCESSING = "Processing"


@marketplace.aggregate(schema_name="orders")
class Order:
    """A buyer's purchase.

    The lines of an order are the OrderItem aggregates that carry its id. The
    order status is never set by a client: it starts as Pending and is
    recomputed from the item statuses whenever a seller updates an item.
    """

    buyer_id: Identifier(required=True)
    shipping_address: Text(required=True)
    total_amount: Float(required=True, min_value=0.0)
    item_count: Integer(default=0, min_value=0)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at: DateTime(default=lambda: datetime.now(UTC))
    updated_at: DateTime(default=lambda: datetime.now(UTC))

    @classmethod
    def place(cls, buyer_id, shipping_address, total_amount, item_count):
        now = datetime.now(UTC)
        order = cls(
            buyer_id=buyer_id,
            shipping_address=shipping_address,
            total_amount=total_amount,
            item_count=item_count,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                buyer_id=buyer_id,
                total_amount=total_amount,
                item_count=item_count,
                placed_at=now,
            )
        )
        return order

    def apply_derived_status(self, new_status) -> bool:
        """Store a recomputed status. Returns False when nothing changed."""

        if new_status is None or new_status == self.status:
            return False

        previous = self.status
        self.status = new_status
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=new_status,
                changed_at=self.updated_at,
            )
        )
        return True
