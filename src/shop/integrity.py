"""Cross-cutting validation run before any mutation is written.

Checks are side-effect free. Each one returns ``None`` when the prospective
mutation is acceptable, or the first ``Violation`` found. Rules are always
evaluated in the same priority order:

1. required fields are present,
2. values have the right type and range (quantity > 0, price >= 0),
3. referenced customers, shop items and categories exist,
4. uniqueness (customer email).

Errors are never aggregated: the first failing rule wins.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError

from shop.category.category import Category
from shop.customer.customer import Customer
from shop.exceptions import ConflictError, NotFoundError
from shop.order.order import OrderLine
from shop.shop_item.shop_item import ShopItem


class Rule(Enum):
    PRESENCE = "presence"
    RANGE = "range"
    EXISTENCE = "existence"
    UNIQUENESS = "uniqueness"


@dataclass(frozen=True)
class Violation:
    rule: Rule
    field: str
    message: str

    def to_exception(self):
        messages = {self.field: [self.message]}
        if self.rule is Rule.EXISTENCE:
            return NotFoundError(messages)
        if self.rule is Rule.UNIQUENESS:
            return ConflictError(messages)
        return ValidationError(messages)


def enforce(violation: Violation | None) -> None:
    """Raise the exception matching `violation`, if there is one."""
    if violation is not None:
        raise violation.to_exception()


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_number(value) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Shape checks (no I/O)
# ---------------------------------------------------------------------------
def order_shape_violation(customer_id, items) -> Violation | None:
    if _blank(customer_id):
        return Violation(Rule.PRESENCE, "customer_id", "Customer ID is required")

    if not isinstance(items, list | tuple) or not items:
        return Violation(Rule.PRESENCE, "items", "Order must contain at least one item")

    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            return Violation(Rule.PRESENCE, f"items[{index}]", "Each item must have shopItemId and positive quantity")
        if _blank(item.get("shop_item_id")):
            return Violation(Rule.PRESENCE, f"items[{index}].shop_item_id", "Shop item ID is required")
        if item.get("quantity") is None:
            return Violation(Rule.PRESENCE, f"items[{index}].quantity", "Quantity is required")

    for index, item in enumerate(items):
        quantity = item["quantity"]
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            return Violation(Rule.RANGE, f"items[{index}].quantity", "Quantity must be a whole number")
        if quantity <= 0:
            return Violation(Rule.RANGE, f"items[{index}].quantity", "Quantity must be positive")

    return None


def order_lines(items) -> list[OrderLine]:
    """Normalize already validated raw items into `OrderLine`s."""
    return [OrderLine(shop_item_id=str(item["shop_item_id"]), quantity=int(item["quantity"])) for item in items]


def shop_item_shape_violation(title, price, category_ids=None) -> Violation | None:
    if _blank(title):
        return Violation(Rule.PRESENCE, "title", "Title is required")
    if price is None:
        return Violation(Rule.PRESENCE, "price", "Price is required")

    if not _is_number(price):
        return Violation(Rule.RANGE, "price", "Price must be a number")
    if price < 0:
        return Violation(Rule.RANGE, "price", "Price cannot be negative")
    if category_ids is not None:
        if not isinstance(category_ids, list | tuple):
            return Violation(Rule.RANGE, "category_ids", "Category IDs must be a list")
        if any(_blank(category_id) for category_id in category_ids):
            return Violation(Rule.RANGE, "category_ids", "Category IDs cannot be blank")

    return None


def category_shape_violation(title) -> Violation | None:
    if _blank(title):
        return Violation(Rule.PRESENCE, "title", "Title is required")
    return None


def customer_shape_violation(name, surname, email) -> Violation | None:
    for field, value in (("name", name), ("surname", surname), ("email", email)):
        if _blank(value):
            return Violation(Rule.PRESENCE, field, "Name, surname, and email are required")
    return None


# ---------------------------------------------------------------------------
# Checks with read access to the stores
# ---------------------------------------------------------------------------
class IntegrityEnforcer:
    """Validates prospective mutations against the current contents of the stores.

    The domain is passed in rather than looked up, so the same enforcer can run
    against whichever domain context a caller (or a test) has active.
    """

    def __init__(self, domain):
        self._domain = domain

    def _exists(self, aggregate_cls, identifier) -> bool:
        try:
            self._domain.repository_for(aggregate_cls).get(str(identifier))
        except ObjectNotFoundError:
            return False
        return True

    def check_order(self, customer_id, items) -> Violation | None:
        violation = order_shape_violation(customer_id, items)
        if violation is not None:
            return violation

        if not self._exists(Customer, customer_id):
            return Violation(Rule.EXISTENCE, "customer_id", f"Customer {customer_id} not found")

        # One lookup per line so the error names the offending shop item.
        for index, item in enumerate(items):
            shop_item_id = str(item["shop_item_id"])
            if not self._exists(ShopItem, shop_item_id):
                return Violation(
                    Rule.EXISTENCE,
                    f"items[{index}].shop_item_id",
                    f"Shop item {shop_item_id} not found",
                )

        return None

    def check_shop_item(self, title, price, category_ids=None) -> Violation | None:
        violation = shop_item_shape_violation(title, price, category_ids)
        if violation is not None:
            return violation

        for category_id in category_ids or []:
            if not self._exists(Category, category_id):
                return Violation(Rule.EXISTENCE, "category_ids", f"Category {category_id} not found")

        return None

    def check_category(self, title) -> Violation | None:
        return category_shape_violation(title)

    def check_customer(self, name, surname, email, customer_id=None) -> Violation | None:
        """Validate contact details; `customer_id` excludes the customer being updated."""
        violation = customer_shape_violation(name, surname, email)
        if violation is not None:
            return violation

        holder = self._domain.repository_for(Customer).find_by_email(email)
        if holder is not None and str(holder.id) != str(customer_id):
            return Violation(Rule.UNIQUENESS, "email", "Email already exists")

        return None
