"""OrderItem aggregate: a cart line that becomes an order line at checkout."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import InvalidOperationError, ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from marketplace.domain import marketplace
from marketplace.ordering.cart.events import ItemAddedToCart, ItemStatusChanged


class OrderItemStatus(Enum):
    """Fulfilment status of a single line, set by its seller."""

    WAITING = "Waiting"
    CONFIRMED = "Confirmed"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


def parse_item_status(value) -> str:
    """Resolve a status name case-insensitively, e.g. "shipped" -> "Shipped"."""
    if isinstance(value, OrderItemStatus):
        return value.value

    candidate = str(value or "").strip().lower()
    for status in OrderItemStatus:
        if status.value.lower() == candidate:
            return status.value
    raise ValidationError({"status": [f"Invalid status {value!r}"]})


@marketplace.aggregate
class OrderItem:
    """A quantity of one product picked by a buyer.

    While `order_id` is empty the item sits in the buyer's cart. Product name,
    image and price are copied when the item is added and are never refreshed
    from the catalogue afterwards.
    """

    order_id: Identifier()
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    unit_price: Float(required=True, min_value=0.0)
    product_name: String(max_length=200)
    product_image: Text()
    buyer_id: Identifier(required=True)
    seller_id: Identifier()
    status: String(choices=OrderItemStatus, default=OrderItemStatus.WAITING.value)
    added_at: DateTime(default=lambda: datetime.now(UTC))

    @property
    def in_cart(self) -> bool:
        return self.order_id is None

    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    @classmethod
    def add_to_cart(cls, buyer_id, product, quantity):
        item = cls(
            order_id=None,
            product_id=product.id,
            quantity=quantity,
            unit_price=product.price,
            product_name=product.name,
            product_image=product.image,
            buyer_id=buyer_id,
            seller_id=product.seller_id,
            status=OrderItemStatus.WAITING.value,
        )
        item.raise_(
            ItemAddedToCart(
                item_id=item.id,
                buyer_id=buyer_id,
                product_id=product.id,
                seller_id=product.seller_id,
                quantity=quantity,
                unit_price=product.price,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def attach_to_order(self, order_id, seller_id):
        if not self.in_cart:
            raise InvalidOperationError(f"Item {self.id} already belongs to order {self.order_id}")

        self.order_id = order_id
        self.seller_id = seller_id
        self.status = OrderItemStatus.WAITING.value

    # -------------------------------------------------------------------
    # Fulfilment
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        new_status = parse_item_status(new_status)
        previous = self.status
        self.status = new_status

        self.raise_(
            ItemStatusChanged(
                item_id=self.id,
                order_id=self.order_id,
                seller_id=self.seller_id,
                previous_status=previous,
                new_status=new_status,
            )
        )
