"""BDD tests for deriving an order's status from its items."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from marketplace.ordering.cart.fulfilment import UpdateItemStatus
from marketplace.ordering.cart.items import items_of_order
from marketplace.ordering.order.checkout import checkout_cart
from marketplace.ordering.order.order import Order
from marketplace.shared.errors import AccessDenied

scenarios("features/order_status.feature")


@pytest.fixture()
def error():
    return {"exc": None}


@given("a buyer with an order containing items from two sellers", target_fixture="order_id")
def order_with_two_sellers(buyer, product, other_product, add_item):
    add_item(buyer["id"], product)
    add_item(buyer["id"], other_product)
    return checkout_cart(buyer["id"], "221B Baker Street")


def _item_of(order_id, seller_id):
    return next(i for i in items_of_order(order_id) if i.seller_id == seller_id)


def _mark(seller_id, item_id, status):
    current_domain.process(
        UpdateItemStatus(seller_id=seller_id, item_id=item_id, status=status),
        asynchronous=False,
    )


@when(parsers.cfparse('the first seller marks their item as "{status}"'))
def first_seller_marks(seller, order_id, status):
    _mark(seller["id"], _item_of(order_id, seller["id"]).id, status)


@when(parsers.cfparse('the second seller marks their item as "{status}"'))
def second_seller_marks(other_seller, order_id, status):
    _mark(other_seller["id"], _item_of(order_id, other_seller["id"]).id, status)


@when(parsers.cfparse('the second seller tries to mark the first seller\'s item as "{status}"'))
def second_seller_marks_foreign_item(seller, other_seller, order_id, error, status):
    try:
        _mark(other_seller["id"], _item_of(order_id, seller["id"]).id, status)
    except AccessDenied as exc:
        error["exc"] = exc


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status


@then("the update is denied")
def update_denied(error):
    assert isinstance(error["exc"], AccessDenied)
