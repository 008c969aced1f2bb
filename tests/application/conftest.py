import json

import pytest

from shop.category.management import CreateCategory
from shop.customer.management import RegisterCustomer
from shop.shop_item.management import CreateShopItem
from shop.storage import process


@pytest.fixture()
def register_customer():
    def _register(name="Ann", surname="Lee", email="ann@x.com"):
        return process(RegisterCustomer(name=name, surname=surname, email=email))

    return _register


@pytest.fixture()
def create_category():
    def _create(title="Stationery", description=None):
        return process(CreateCategory(title=title, description=description))

    return _create


@pytest.fixture()
def create_shop_item():
    def _create(title="Pen", price=1.5, description=None, category_ids=None):
        return process(
            CreateShopItem(
                title=title,
                description=description,
                price=price,
                category_ids=json.dumps(category_ids) if category_ids is not None else None,
            )
        )

    return _create
