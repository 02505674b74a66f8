"""Who may review what: a buyer whose order item for the product has been closed."""

from protean.utils.globals import current_domain

from marketplace.ordering.cart.item import OrderItem, OrderItemStatus

REVIEWABLE_STATUSES = frozenset({OrderItemStatus.COMPLETED.value, OrderItemStatus.CANCELED.value})


def can_review(buyer_id, product_id) -> bool:
    """True iff the buyer has an order item for the product that is Completed or Canceled."""
    items = (
        current_domain.repository_for(OrderItem)
        ._dao.query.filter(buyer_id=str(buyer_id), product_id=str(product_id))
        .limit(None)
        .all()
        .items
    )
    return any(item.status in REVIEWABLE_STATUSES for item in items)
