"""Shared BDD fixtures and step definitions for the Catalogue."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers

from marketplace.catalogue.category.management import CreateCategory


@pytest.fixture()
def error():
    """Container for the exception captured by a When step."""
    return {"exc": None}


@pytest.fixture()
def categories():
    """Category ids by name."""
    return {}


@given(parsers.cfparse('a seller named "{username}"'), target_fixture="acting_seller")
def a_seller(register, username):
    return register(username, "Seller")


@given(parsers.cfparse('the seller has created a category "{name}"'))
def seller_created_category(acting_seller, categories, name):
    categories[name] = current_domain.process(
        CreateCategory(seller_id=acting_seller["id"], name=name),
        asynchronous=False,
    )


@given(parsers.cfparse('the seller has created a subcategory "{name}" under "{parent}"'))
def seller_created_subcategory(acting_seller, categories, name, parent):
    categories[name] = current_domain.process(
        CreateCategory(seller_id=acting_seller["id"], name=name, parent_category_id=categories[parent]),
        asynchronous=False,
    )
