"""Shape checks run before any store is consulted."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError

from shop.exceptions import ConflictError, NotFoundError, StorageError
from shop.integrity import (
    Rule,
    Violation,
    category_shape_violation,
    customer_shape_violation,
    enforce,
    order_lines,
    order_shape_violation,
    shop_item_shape_violation,
)
from shop.order.order import OrderLine


class TestOrderShape:
    def test_valid_order(self):
        assert order_shape_violation("cust-1", [{"shop_item_id": "item-1", "quantity": 2}]) is None

    def test_missing_customer(self):
        violation = order_shape_violation(None, [{"shop_item_id": "item-1", "quantity": 2}])
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "customer_id"

    def test_blank_customer(self):
        violation = order_shape_violation("  ", [{"shop_item_id": "item-1", "quantity": 2}])
        assert violation.field == "customer_id"

    @pytest.mark.parametrize("items", [None, [], "item-1"])
    def test_items_must_be_a_non_empty_list(self, items):
        violation = order_shape_violation("cust-1", items)
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "items"

    def test_item_without_shop_item(self):
        violation = order_shape_violation("cust-1", [{"quantity": 2}])
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "items[0].shop_item_id"

    def test_item_without_quantity(self):
        violation = order_shape_violation("cust-1", [{"shop_item_id": "item-1"}])
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "items[0].quantity"

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity(self, quantity):
        violation = order_shape_violation("cust-1", [{"shop_item_id": "item-1", "quantity": quantity}])
        assert violation.rule is Rule.RANGE
        assert violation.field == "items[0].quantity"

    @pytest.mark.parametrize("quantity", [1.5, "2", True])
    def test_quantity_must_be_whole_number(self, quantity):
        violation = order_shape_violation("cust-1", [{"shop_item_id": "item-1", "quantity": quantity}])
        assert violation.rule is Rule.RANGE

    def test_presence_is_reported_before_range(self):
        items = [
            {"shop_item_id": "item-1", "quantity": 0},
            {"quantity": 1},
        ]
        violation = order_shape_violation("cust-1", items)
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "items[1].shop_item_id"

    def test_order_lines(self):
        lines = order_lines([{"shop_item_id": "item-1", "quantity": 2}])
        assert lines == [OrderLine(shop_item_id="item-1", quantity=2)]


class TestShopItemShape:
    def test_valid_shop_item(self):
        assert shop_item_shape_violation("Pen", 1.5, ["cat-1"]) is None

    def test_zero_price_is_allowed(self):
        assert shop_item_shape_violation("Freebie", 0) is None

    def test_missing_title(self):
        assert shop_item_shape_violation("", 1.5).field == "title"

    def test_missing_price(self):
        violation = shop_item_shape_violation("Pen", None)
        assert violation.rule is Rule.PRESENCE
        assert violation.field == "price"

    def test_negative_price(self):
        violation = shop_item_shape_violation("Pen", -1)
        assert violation.rule is Rule.RANGE
        assert violation.field == "price"

    def test_blank_category_id(self):
        violation = shop_item_shape_violation("Pen", 1.5, ["cat-1", ""])
        assert violation.rule is Rule.RANGE
        assert violation.field == "category_ids"


class TestCategoryAndCustomerShape:
    def test_category_title_required(self):
        assert category_shape_violation(None).field == "title"
        assert category_shape_violation("Books") is None

    @pytest.mark.parametrize(
        "name, surname, email, field",
        [
            (None, "Lee", "ann@x.com", "name"),
            ("Ann", "", "ann@x.com", "surname"),
            ("Ann", "Lee", None, "email"),
        ],
    )
    def test_customer_fields_required(self, name, surname, email, field):
        assert customer_shape_violation(name, surname, email).field == field


class TestEnforce:
    def test_no_violation_passes(self):
        enforce(None)

    @pytest.mark.parametrize(
        "rule, exc_class",
        [
            (Rule.PRESENCE, ValidationError),
            (Rule.RANGE, ValidationError),
            (Rule.EXISTENCE, NotFoundError),
            (Rule.UNIQUENESS, ConflictError),
        ],
    )
    def test_violation_raises_matching_exception(self, rule, exc_class):
        with pytest.raises(exc_class) as exc_info:
            enforce(Violation(rule, "field", "message"))
        assert exc_info.value.messages == {"field": ["message"]}


class TestErrorMessages:
    @pytest.mark.parametrize("exc_class", [NotFoundError, ConflictError, StorageError])
    def test_shop_errors_keep_their_messages(self, exc_class):
        exc = exc_class({"customer_id": ["Customer c-1 not found"]})
        assert exc.messages == {"customer_id": ["Customer c-1 not found"]}

    def test_not_found_is_an_object_not_found_error(self):
        assert isinstance(NotFoundError({"order_id": ["missing"]}), ObjectNotFoundError)
