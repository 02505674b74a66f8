"""Domain events for the Product aggregate."""

from protean.fields import Boolean, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductListed:
    """A seller put a new product on sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)


@marketplace.event(part_of="Product")
class ProductUpdated:
    """A seller changed a product's details, price or availability."""

    __version__ = 1

    product_id: Identifier(required=True)
    category_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    is_available: Boolean()
