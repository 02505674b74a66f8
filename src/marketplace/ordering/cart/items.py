"""Cart management: commands, handler and cart queries."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.ordering.cart.item import OrderItem
from marketplace.shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="OrderItem")
class AddToCart:
    buyer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)


@marketplace.command(part_of="OrderItem")
class RemoveFromCart:
    buyer_id: Identifier(required=True)
    item_id: Identifier(required=True)


def cart_of(buyer_id) -> list[OrderItem]:
    """Unordered items of a buyer, oldest first."""
    items = (
        current_domain.repository_for(OrderItem)
        ._dao.query.filter(buyer_id=str(buyer_id), order_id__isnull=True)
        .limit(None)
        .all()
        .items
    )
    return sorted(items, key=lambda i: i.added_at)


def items_of_order(order_id) -> list[OrderItem]:
    items = (
        current_domain.repository_for(OrderItem)._dao.query.filter(order_id=str(order_id)).limit(None).all().items
    )
    return sorted(items, key=lambda i: i.added_at)


@marketplace.command_handler(part_of=OrderItem)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)

        item = OrderItem.add_to_cart(
            buyer_id=command.buyer_id,
            product=product,
            quantity=command.quantity,
        )
        current_domain.repository_for(OrderItem).add(item)
        logger.info(
            "Item added to cart",
            item_id=str(item.id),
            buyer_id=str(command.buyer_id),
            product_id=str(product.id),
        )
        return str(item.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(OrderItem)
        try:
            item = repo.get(command.item_id)
        except ObjectNotFoundError:
            raise AccessDenied("Item is not in your cart") from None

        if str(item.buyer_id) != str(command.buyer_id) or not item.in_cart:
            raise AccessDenied("Item is not in your cart")

        repo._dao.delete(item)
