"""View assembler: reshapes orders and the records they reference into nested dictionaries.

The result mirrors an outer join at every hop. An order whose customer has
gone still shows up, with ``customer`` set to ``None``; a line whose shop item
has gone keeps its id and quantity, with ``shop_item`` set to ``None``.

Lookups are batched per call: however many orders are assembled, customers,
shop items and categories are each fetched with a single query.
"""

from protean.exceptions import ObjectNotFoundError

from shop.customer.customer import Customer
from shop.exceptions import NotFoundError
from shop.order.order import Order
from shop.shop_item.categories import CategoryResolver
from shop.shop_item.shop_item import ShopItem
from shop.views import shop_item_view


class OrderViewAssembler:
    def __init__(self, domain):
        self._domain = domain

    def get(self, order_id) -> dict:
        try:
            order = self._domain.repository_for(Order).get(str(order_id))
        except ObjectNotFoundError as exc:
            raise NotFoundError({"order_id": [f"Order {order_id} not found"]}) from exc
        return self.assemble([order])[0]

    def list_all(self) -> list[dict]:
        return self.assemble(self._domain.repository_for(Order).list_all())

    def assemble(self, orders) -> list[dict]:
        orders = list(orders)
        customers = self._domain.repository_for(Customer).find_many(order.customer_id for order in orders)
        shop_items = self._domain.repository_for(ShopItem).find_many(
            item.shop_item_id for order in orders for item in order.items or []
        )
        categories = CategoryResolver(self._domain).categories_for(shop_items.values())

        return [self._order_view(order, customers, shop_items, categories) for order in orders]

    def _order_view(self, order, customers, shop_items, categories) -> dict:
        customer = customers.get(str(order.customer_id))
        return {
            "id": str(order.id),
            "customer_id": str(order.customer_id),
            "customer": (
                {
                    "id": str(customer.id),
                    "name": customer.name,
                    "surname": customer.surname,
                    "email": customer.email,
                }
                if customer is not None
                else None
            ),
            "items": [self._item_view(item, shop_items, categories) for item in order.items or []],
            "created_at": order.created_at,
            "updated_at": order.updated_at,
        }

    def _item_view(self, item, shop_items, categories) -> dict:
        shop_item = shop_items.get(str(item.shop_item_id))
        return {
            "id": str(item.id),
            "quantity": item.quantity,
            "shop_item_id": str(item.shop_item_id),
            "shop_item": shop_item_view(shop_item, categories) if shop_item is not None else None,
        }
