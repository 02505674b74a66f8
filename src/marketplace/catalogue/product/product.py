"""Product aggregate: an item a seller offers in the catalogue."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace
from marketplace.catalogue.product.events import ProductListed, ProductUpdated


def _utcnow():
    return datetime.now(UTC)


@marketplace.aggregate
class Product:
    """A listing owned by exactly one seller.

    The image is carried as base64 text. Order items copy name, price and
    image at the time they are added to a cart, so edits here never rewrite
    order history.
    """

    name: String(required=True, max_length=200)
    description: Text()
    price: Float(required=True, min_value=0.0)
    category_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    is_available: Boolean(default=True)
    image: Text()
    created_at: DateTime(default=_utcnow)
    updated_at: DateTime(default=_utcnow)

    @classmethod
    def create(cls, seller_id, name, price, category_id, description=None, is_available=True, image=None):
        now = _utcnow()
        product = cls(
            name=name,
            description=description,
            price=price,
            category_id=category_id,
            seller_id=seller_id,
            is_available=is_available,
            image=image,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductListed(
                product_id=product.id,
                seller_id=seller_id,
                category_id=category_id,
                name=name,
                price=price,
            )
        )
        return product

    def update_details(self, name, price, category_id, description=None, is_available=True, image=None):
        self.name = name
        self.description = description
        self.price = price
        self.category_id = category_id
        self.is_available = is_available
        self.image = image
        self.updated_at = _utcnow()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                category_id=category_id,
                name=name,
                price=price,
                is_available=is_available,
            )
        )
