"""Order aggregate root and its line items."""

from datetime import datetime
from typing import NamedTuple

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from shop.domain import shop


class OrderLine(NamedTuple):
    """A requested line: which shop item and how many."""

    shop_item_id: str
    quantity: int


@shop.entity(part_of="Order")
class OrderItem:
    """A line of an order.

    Holds a plain reference to the shop item. Two lines may point at the same
    shop item; they are kept apart and never merged.
    """

    shop_item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    created_at = DateTime(default=datetime.now)


@shop.aggregate
class Order:
    """An order placed by a customer, owning its line items.

    Items are never edited in place. Changing an order replaces the whole
    item set, so every line receives a new identity on each update.
    """

    customer_id = Identifier(required=True)
    items = HasMany(OrderItem)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def place(cls, customer_id, lines):
        now = datetime.now()
        order = cls(customer_id=customer_id, created_at=now, updated_at=now)
        order._add_lines(lines)
        return order

    def replace_items(self, customer_id, lines):
        """Reassign the owner and swap the full item set for `lines`."""
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        self.customer_id = customer_id
        self.clear_items()
        self._add_lines(lines)
        self.updated_at = datetime.now()

    def clear_items(self):
        for item in list(self.items or []):
            self.remove_items(item)

    def drop_items_for(self, shop_item_id) -> int:
        """Remove every line pointing at `shop_item_id`. Returns how many were removed."""
        stale = [item for item in self.items or [] if str(item.shop_item_id) == str(shop_item_id)]
        for item in stale:
            self.remove_items(item)
        if stale:
            self.updated_at = datetime.now()
        return len(stale)

    def _add_lines(self, lines):
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        now = datetime.now()
        for line in lines:
            self.add_items(
                OrderItem(
                    shop_item_id=line.shop_item_id,
                    quantity=line.quantity,
                    created_at=now,
                )
            )
