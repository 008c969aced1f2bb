"""Repository for the Order aggregate."""

from protean.utils.globals import current_domain

from shop.domain import shop
from shop.order.order import Order, OrderItem


@shop.repository(part_of=Order)
class OrderRepository:
    def list_all(self) -> list[Order]:
        return self._dao.query.order_by("created_at").all().items

    def find_by_customer(self, customer_id) -> list[Order]:
        return self._dao.query.filter(customer_id=str(customer_id)).all().items

    def referencing_shop_item(self, shop_item_id) -> list[Order]:
        """Orders with at least one line pointing at the given shop item."""
        lines = current_domain.repository_for(OrderItem)._dao.query.filter(shop_item_id=str(shop_item_id)).all()
        order_ids = {str(line.order_id) for line in lines.items}
        return [self.get(order_id) for order_id in sorted(order_ids)]

    def remove_order(self, order: Order) -> None:
        # Child rows before the parent row; not every provider cascades.
        order.clear_items()
        self.add(order)
        self._dao.delete(order)
