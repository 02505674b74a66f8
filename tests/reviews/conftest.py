"""Shared fixtures for review tests."""

import pytest
from protean import current_domain

from marketplace.ordering.cart.fulfilment import UpdateItemStatus
from marketplace.ordering.cart.items import AddToCart
from marketplace.ordering.order.checkout import checkout_cart


@pytest.fixture()
def ordered_item(buyer, product):
    """An ordered, still Waiting, item of the buyer for the product."""
    item_id = current_domain.process(
        AddToCart(buyer_id=buyer["id"], product_id=product, quantity=1),
        asynchronous=False,
    )
    checkout_cart(buyer["id"], "221B Baker Street")
    return item_id


@pytest.fixture()
def set_item_status(seller):
    def _set(item_id, status):
        current_domain.process(
            UpdateItemStatus(seller_id=seller["id"], item_id=item_id, status=status),
            asynchronous=False,
        )

    return _set


@pytest.fixture()
def completed_item(ordered_item, set_item_status):
    set_item_status(ordered_item, "Completed")
    return ordered_item
