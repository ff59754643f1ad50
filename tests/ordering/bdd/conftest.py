"""Shared BDD fixtures and step definitions for Ordering."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from printeez.order.order import Order
from printeez.product.product import Product


@pytest.fixture()
def products():
    """Products created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def shoppers():
    return []


@pytest.fixture()
def error():
    """Container for the error raised by a When step."""
    return {"exc": None}


@pytest.fixture()
def placed():
    """Orders placed by the scenario."""
    return []


def _product(products, name):
    return current_domain.repository_for(Product).get(products[name])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} units of size "{size}"'))
def _(make_product, products, name, price, stock, size):
    products[name] = make_product(name=name, price=price, sizes={size: stock}).id


@given(parsers.cfparse('a registered shopper "{email}"'))
@given(parsers.cfparse('a second registered shopper "{email}"'))
def _(make_user, shoppers, email):
    shoppers.append(make_user(email=email))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order is rejected with "{message}"'))
def _(error, placed, message):
    assert error["exc"] is not None
    assert str(error["exc"]) == message
    assert placed == []
    assert current_domain.repository_for(Order)._dao.query.all().total == 0


@then(parsers.cfparse('"{name}" has {stock:d} units of size "{size}" left'))
def _(products, name, stock, size):
    assert _product(products, name).stock_for(size) == stock


@then(parsers.cfparse('"{name}" has sold {count:d} units'))
def _(products, name, count):
    assert _product(products, name).sales_count == count


@then("the shopper receives an order confirmation email")
def _(shoppers, outbox):
    assert [email["to"] for email in outbox.sent_emails] == [shoppers[0].email]
    assert outbox.sent_emails[0]["subject"] == "Order Confirmation - Printeez"


@then("no order confirmation email is sent")
def _(outbox):
    assert outbox.sent_emails == []
