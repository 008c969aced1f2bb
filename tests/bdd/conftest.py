"""Shared BDD fixtures and step definitions for the shop."""

import json

import pytest
from pytest_bdd import given, parsers

from shop.customer.management import RegisterCustomer
from shop.order.service import create_order
from shop.shop_item.management import CreateShopItem
from shop.storage import process


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def shop_items():
    """Shop item ids keyed by title."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a customer "{name}" "{surname}" with email "{email}"'),
    target_fixture="customer_id",
)
def registered_customer(name, surname, email):
    return process(RegisterCustomer(name=name, surname=surname, email=email))


@given(parsers.cfparse('a shop item "{title}" priced {price:f}'))
def shop_item(title, price, shop_items):
    shop_items[title] = process(CreateShopItem(title=title, price=price, category_ids=json.dumps([])))


@given(parsers.cfparse('the customer has ordered {quantity:d} of "{title}"'), target_fixture="order")
def existing_order(quantity, title, customer_id, shop_items):
    return create_order(customer_id, [{"shop_item_id": shop_items[title], "quantity": quantity}])
