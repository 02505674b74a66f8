"""Seller-side item status updates: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.cart.item import OrderItem, parse_item_status
from marketplace.ordering.order.recalculation import recalculate_order_status
from marketplace.shared.errors import AccessDenied

logger = structlog.get_logger(__name__)


@marketplace.command(part_of="OrderItem")
class UpdateItemStatus:
    seller_id: Identifier(required=True)
    item_id: Identifier(required=True)
    status: String(required=True, max_length=20)


@marketplace.command_handler(part_of=OrderItem)
class UpdateItemStatusHandler:
    @handle(UpdateItemStatus)
    def update_item_status(self, command):
        repo = current_domain.repository_for(OrderItem)
        try:
            item = repo.get(command.item_id)
        except ObjectNotFoundError:
            raise AccessDenied("You do not sell this item") from None

        if str(item.seller_id) != str(command.seller_id):
            raise AccessDenied("You do not sell this item")

        item.change_status(parse_item_status(command.status))
        repo.add(item)

        if item.order_id is not None:
            # Recomputed in the same unit of work as the item write
            order_status = recalculate_order_status(item.order_id, updated_item=item)
            logger.info(
                "Order status recalculated",
                order_id=str(item.order_id),
                item_id=str(item.id),
                order_status=order_status,
            )
        return item.status
