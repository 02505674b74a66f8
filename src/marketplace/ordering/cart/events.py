"""Domain events for the OrderItem aggregate."""

from protean.fields import Float, Identifier, Integer, String

from marketplace.domain import marketplace


@marketplace.event(part_of="OrderItem")
class ItemAddedToCart:
    """A buyer put a product into their cart."""

    __version__ = 1

    item_id: Identifier(required=True)
    buyer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    seller_id: Identifier()
    quantity: Integer(required=True)
    unit_price: Float(required=True)


@marketplace.event(part_of="OrderItem")
class ItemStatusChanged:
    """A seller moved an ordered item to a new fulfilment status."""

    __version__ = 1

    item_id: Identifier(required=True)
    order_id: Identifier()
    seller_id: Identifier()
    previous_status: String(required=True)
    new_status: String(required=True)
