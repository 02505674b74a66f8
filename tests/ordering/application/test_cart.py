"""Application tests for adding and removing cart items."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from marketplace.catalogue.product.management import UpdateProduct
from marketplace.ordering.cart.item import OrderItem
from marketplace.ordering.cart.items import RemoveFromCart, cart_of
from marketplace.ordering.order.checkout import checkout_cart
from marketplace.shared.errors import AccessDenied


class TestAddToCart:
    def test_item_lands_in_the_cart(self, buyer, seller, product, cart_item):
        items = cart_of(buyer["id"])
        assert [i.id for i in items] == [cart_item]
        assert items[0].quantity == 2
        assert items[0].unit_price == 25.0
        assert items[0].seller_id == seller["id"]

    def test_unknown_product(self, buyer, add_item):
        with pytest.raises(ObjectNotFoundError):
            add_item(buyer["id"], "missing")

    def test_price_is_a_snapshot(self, buyer, seller, category, product, cart_item):
        current_domain.process(
            UpdateProduct(
                seller_id=seller["id"],
                product_id=product,
                name="Keyboard",
                price=99.0,
                category_id=category,
            ),
            asynchronous=False,
        )
        item = current_domain.repository_for(OrderItem).get(cart_item)
        assert item.unit_price == 25.0
        assert item.product_name == "Mechanical keyboard"

    def test_carts_are_per_buyer(self, buyer, other_buyer, cart_item):
        assert cart_of(other_buyer["id"]) == []


class TestRemoveFromCart:
    def test_remove_own_item(self, buyer, cart_item):
        current_domain.process(RemoveFromCart(buyer_id=buyer["id"], item_id=cart_item), asynchronous=False)
        assert cart_of(buyer["id"]) == []

    def test_cannot_remove_another_buyers_item(self, buyer, other_buyer, cart_item):
        with pytest.raises(AccessDenied):
            current_domain.process(RemoveFromCart(buyer_id=other_buyer["id"], item_id=cart_item), asynchronous=False)
        assert len(cart_of(buyer["id"])) == 1

    def test_missing_item_is_reported_as_forbidden(self, buyer):
        with pytest.raises(AccessDenied):
            current_domain.process(RemoveFromCart(buyer_id=buyer["id"], item_id="missing"), asynchronous=False)

    def test_ordered_item_cannot_be_removed(self, buyer, cart_item):
        checkout_cart(buyer["id"], "221B Baker Street")
        with pytest.raises(AccessDenied):
            current_domain.process(RemoveFromCart(buyer_id=buyer["id"], item_id=cart_item), asynchronous=False)
