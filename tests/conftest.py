import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Fetch and activate the domain by pushing the associated domain_context. The activated domain can then be referred to elsewhere as `current_domain`
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from marketplace.domain import marketplace

    marketplace.init()
    marketplace.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from marketplace.domain import marketplace
    from marketplace.utils.db import drop_db, setup_db

    setup_db(marketplace)

    yield

    drop_db(marketplace)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from marketplace.web import create_app

    return TestClient(create_app())


def _register(username, role, password="Secret123!"):
    from protean import current_domain

    from marketplace.identity.registration import RegisterAccount
    from marketplace.identity.security import create_token

    account_id = current_domain.process(
        RegisterAccount(
            username=username,
            email=f"{username}@example.com",
            password=password,
            role=role,
        ),
        asynchronous=False,
    )
    token = create_token(account_id, role, username)
    return {
        "id": account_id,
        "username": username,
        "password": password,
        "role": role,
        "headers": {"Authorization": f"Bearer {token}"},
    }


@pytest.fixture()
def register():
    """Factory registering an account and returning its id and auth headers."""
    return _register


@pytest.fixture()
def buyer():
    return _register("alice", "Buyer")


@pytest.fixture()
def other_buyer():
    return _register("bob", "Buyer")


@pytest.fixture()
def seller():
    return _register("sam", "Seller")


@pytest.fixture()
def other_seller():
    return _register("sue", "Seller")


@pytest.fixture()
def category(seller):
    from protean import current_domain

    from marketplace.catalogue.category.management import CreateCategory

    return current_domain.process(
        CreateCategory(seller_id=seller["id"], name="Electronics", description="Gadgets"),
        asynchronous=False,
    )


@pytest.fixture()
def product(seller, category):
    from protean import current_domain

    from marketplace.catalogue.product.management import CreateProduct

    return current_domain.process(
        CreateProduct(
            seller_id=seller["id"],
            name="Mechanical keyboard",
            description="87 keys",
            price=25.0,
            category_id=category,
            image="aW1hZ2U=",
        ),
        asynchronous=False,
    )
