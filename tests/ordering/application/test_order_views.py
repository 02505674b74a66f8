"""Application tests for the buyer and seller order views."""

import pytest

from marketplace.ordering.order.checkout import checkout_cart
from marketplace.ordering.order.views import order_for_buyer, orders_for_buyer, orders_for_seller
from marketplace.shared.errors import AccessDenied


class TestBuyerViews:
    def test_history_lists_own_orders_newest_first(self, buyer, product, placed_order, add_item):
        add_item(buyer["id"], product)
        newer = checkout_cart(buyer["id"], "1 Main St")

        assert [v.order.id for v in orders_for_buyer(buyer["id"])] == [newer, placed_order]

    def test_other_buyers_see_nothing(self, other_buyer, placed_order):
        assert orders_for_buyer(other_buyer["id"]) == []

    def test_detail_includes_all_items(self, buyer, placed_order):
        view = order_for_buyer(placed_order, buyer["id"])
        assert len(view.items) == 2

    def test_detail_of_another_buyers_order(self, other_buyer, placed_order):
        with pytest.raises(AccessDenied):
            order_for_buyer(placed_order, other_buyer["id"])

    def test_detail_of_missing_order(self, buyer):
        with pytest.raises(AccessDenied):
            order_for_buyer("missing", buyer["id"])


class TestSellerView:
    def test_seller_sees_only_own_items(self, seller, other_seller, placed_order):
        views = orders_for_seller(seller["id"])
        assert [v.order.id for v in views] == [placed_order]
        assert [i.seller_id for i in views[0].items] == [seller["id"]]

        theirs = orders_for_seller(other_seller["id"])
        assert [i.product_name for i in theirs[0].items] == ["Wireless mouse"]

    def test_cart_items_are_not_orders(self, seller, cart_item):
        assert orders_for_seller(seller["id"]) == []
