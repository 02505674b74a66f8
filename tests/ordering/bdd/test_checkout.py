"""BDD tests for checking out a cart."""

import pytest
from protean import current_domain
from protean.exceptions import InvalidOperationError
from pytest_bdd import given, parsers, scenarios, then, when

from marketplace.catalogue.product.management import CreateProduct
from marketplace.ordering.cart.items import cart_of, items_of_order
from marketplace.ordering.order.checkout import checkout_cart
from marketplace.ordering.order.order import Order
from marketplace.ordering.order.views import orders_for_buyer

scenarios("features/checkout.feature")


@pytest.fixture()
def error():
    return {"exc": None}


@pytest.fixture()
def placed():
    """Ids of the orders placed during the scenario."""
    return []


@given(parsers.cfparse('a buyer named "{username}"'), target_fixture="shopper")
def a_buyer(register, username):
    return register(username, "Buyer")


@given(parsers.cfparse("a product priced {price:g}"), target_fixture="priced_product")
def a_product(seller, category, price):
    return current_domain.process(
        CreateProduct(seller_id=seller["id"], name="Notebook", price=price, category_id=category),
        asynchronous=False,
    )


@given(parsers.cfparse("the buyer has {quantity:d} of the product in the cart"))
def product_in_cart(shopper, priced_product, add_item, quantity):
    add_item(shopper["id"], priced_product, quantity)


@when(parsers.cfparse('the buyer checks out to "{address}"'))
def buyer_checks_out(shopper, error, placed, address):
    try:
        placed.append(checkout_cart(shopper["id"], address))
    except InvalidOperationError as exc:
        error["exc"] = exc


@then(parsers.cfparse("an order is placed with a total of {total:g}"))
def order_placed(placed, total):
    assert len(placed) == 1
    assert current_domain.repository_for(Order).get(placed[0]).total_amount == total


@then(parsers.cfparse("the order has {count:d} item"))
def order_has_items(placed, count):
    assert len(items_of_order(placed[0])) == count


@then("the cart is empty")
def cart_is_empty(shopper):
    assert cart_of(shopper["id"]) == []


@then("the checkout is rejected")
def checkout_rejected(error):
    assert isinstance(error["exc"], InvalidOperationError)


@then(parsers.cfparse("the buyer has {count:d} order"))
def buyer_has_orders(shopper, count):
    assert len(orders_for_buyer(shopper["id"])) == count
