import json
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
    os.environ["EMAIL_BACKEND"] = "fake"

    from printeez.domain import printeez

    printeez.init()
    printeez.domain_context().push()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path) or "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db(request):
    from printeez.domain import printeez
    from printeez.utils.db import drop_db, setup_db

    setup_db(printeez)

    yield

    drop_db(printeez)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    from printeez.notifications.channel import reset_channels

    reset_channels()

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    """Persist a product through AddProduct and return it reloaded."""
    from protean import current_domain

    from printeez.product.creation import AddProduct
    from printeez.product.product import Product

    def _make(name="Tee", sizes=None, price=20.0, category="urban", description=None):
        product_id = current_domain.process(
            AddProduct(
                name=name,
                category=category,
                price=price,
                description=description,
                sizes=json.dumps(sizes if sizes is not None else {"Large": 2}),
            ),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def make_user():
    """Register a user and optionally promote them to admin."""
    from protean import current_domain

    from printeez.user.registration import PromoteToAdmin, RegisterUser
    from printeez.user.user import User

    counter = {"n": 0}

    def _make(name="Ayesha Khan", email=None, password="s3cret-pass", address=None, admin=False):
        counter["n"] += 1
        email = email or f"shopper{counter['n']}@example.com"
        user_id = current_domain.process(
            RegisterUser(name=name, email=email, password=password, address=address),
            asynchronous=False,
        )
        if admin:
            current_domain.process(PromoteToAdmin(user_id=user_id), asynchronous=False)
        return current_domain.repository_for(User).get(user_id)

    return _make


@pytest.fixture()
def outbox():
    """The fake email adapter order confirmations are sent through."""
    from printeez.notifications.channel import get_channel

    return get_channel("fake")


@pytest.fixture()
def stock_of():
    """Current persisted stock for a size of a product."""
    from protean import current_domain

    from printeez.product.product import Product

    def _stock(product_id, size):
        return current_domain.repository_for(Product).get(product_id).stock_for(size)

    return _stock


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from printeez.web import create_app

    return TestClient(create_app())


@pytest.fixture()
def sqlite_store(tmp_path):
    """Point the default provider at a SQLite file that every thread and session shares.

    The in-memory provider gives each unit of work a private copy of the data,
    so races between placements are only meaningful against a real database.
    """
    from printeez.domain import printeez
    from printeez.utils.db import drop_db, setup_db

    databases = printeez.config["databases"]
    printeez.config["databases"] = {
        **databases,
        "default": {
            "provider": "sqlite",
            "database_uri": f"sqlite:///{tmp_path / 'printeez.db'}",
            "connect_args": {"timeout": 30},
        },
    }
    printeez.providers._initialize()
    setup_db(printeez)

    yield printeez

    drop_db(printeez)
    printeez.config["databases"] = databases
    printeez.providers._initialize()
