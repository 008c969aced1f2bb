import pytest
from protean.exceptions import ValidationError
from protean.utils import DomainObjects
from protean.utils.reflection import declared_fields

from shop.order.order import Order, OrderItem, OrderLine


def test_order_element_type():
    assert Order.element_type == DomainObjects.AGGREGATE


def test_order_item_element_type():
    assert OrderItem.element_type == DomainObjects.ENTITY


def test_order_has_defined_fields():
    assert all(field_name in declared_fields(Order) for field_name in ["customer_id", "created_at", "updated_at"])


class TestOrderItem:
    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderItem(shop_item_id="item-1", quantity=0)
        assert "quantity" in exc_info.value.messages

    def test_shop_item_reference_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            OrderItem(quantity=1)
        assert "shop_item_id" in exc_info.value.messages


class TestPlaceOrder:
    def test_place_creates_one_item_per_line(self):
        order = Order.place("cust-1", [OrderLine("item-1", 3), OrderLine("item-2", 1)])

        assert order.customer_id == "cust-1"
        assert sorted((item.shop_item_id, item.quantity) for item in order.items) == [
            ("item-1", 3),
            ("item-2", 1),
        ]

    def test_duplicate_lines_are_kept_apart(self):
        order = Order.place("cust-1", [OrderLine("item-1", 1), OrderLine("item-1", 2)])

        assert len(order.items) == 2
        assert sorted(item.quantity for item in order.items) == [1, 2]

    def test_place_without_lines_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Order.place("cust-1", [])
        assert "items" in exc_info.value.messages

    def test_timestamps_are_set(self):
        order = Order.place("cust-1", [OrderLine("item-1", 1)])

        assert order.created_at is not None
        assert order.updated_at == order.created_at


class TestReplaceItems:
    def test_replace_swaps_the_whole_item_set(self):
        order = Order.place("cust-1", [OrderLine("item-1", 3), OrderLine("item-2", 1)])

        order.replace_items("cust-1", [OrderLine("item-3", 5)])

        assert [(item.shop_item_id, item.quantity) for item in order.items] == [("item-3", 5)]

    def test_replace_allocates_new_item_identities(self):
        order = Order.place("cust-1", [OrderLine("item-1", 3)])
        old_ids = {item.id for item in order.items}

        order.replace_items("cust-1", [OrderLine("item-1", 3)])

        assert {item.id for item in order.items}.isdisjoint(old_ids)

    def test_replace_can_reassign_customer(self):
        order = Order.place("cust-1", [OrderLine("item-1", 1)])

        order.replace_items("cust-2", [OrderLine("item-1", 1)])

        assert order.customer_id == "cust-2"

    def test_replace_with_nothing_keeps_existing_items(self):
        order = Order.place("cust-1", [OrderLine("item-1", 1)])

        with pytest.raises(ValidationError):
            order.replace_items("cust-1", [])

        assert len(order.items) == 1


class TestDropItemsFor:
    def test_drops_every_line_for_the_shop_item(self):
        order = Order.place(
            "cust-1",
            [OrderLine("item-1", 1), OrderLine("item-2", 2), OrderLine("item-1", 4)],
        )

        dropped = order.drop_items_for("item-1")

        assert dropped == 2
        assert [item.shop_item_id for item in order.items] == ["item-2"]

    def test_unrelated_shop_item_drops_nothing(self):
        order = Order.place("cust-1", [OrderLine("item-1", 1)])

        assert order.drop_items_for("item-9") == 0
        assert len(order.items) == 1
