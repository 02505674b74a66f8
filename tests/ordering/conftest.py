"""Shared fixtures for ordering tests."""

import pytest
from protean import current_domain

from marketplace.catalogue.product.management import CreateProduct
from marketplace.ordering.cart.items import AddToCart
from marketplace.ordering.order.checkout import checkout_cart


def add_to_cart(buyer_id, product_id, quantity=1):
    return current_domain.process(
        AddToCart(buyer_id=buyer_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


@pytest.fixture()
def other_product(other_seller, category):
    """A product of a second seller in the same category."""
    return current_domain.process(
        CreateProduct(
            seller_id=other_seller["id"],
            name="Wireless mouse",
            price=10.0,
            category_id=category,
        ),
        asynchronous=False,
    )


@pytest.fixture()
def cart_item(buyer, product):
    return add_to_cart(buyer["id"], product, quantity=2)


@pytest.fixture()
def placed_order(buyer, product, other_product):
    """An order of the buyer with one line from each seller."""
    add_to_cart(buyer["id"], product, quantity=2)
    add_to_cart(buyer["id"], other_product, quantity=1)
    return checkout_cart(buyer["id"], "221B Baker Street")


@pytest.fixture()
def add_item():
    """Put `quantity` of a product into a buyer's cart; returns the item id."""
    return add_to_cart
