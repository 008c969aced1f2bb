"""Order management: placing, replacing and cancelling orders."""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from shop.domain import shop
from shop.exceptions import NotFoundError
from shop.integrity import IntegrityEnforcer, enforce, order_lines, order_shape_violation
from shop.order.order import Order

logger = structlog.get_logger(__name__)


@shop.command(part_of="Order")
class CreateOrder:
    customer_id: Identifier()
    items: Text()  # JSON: [{"shop_item_id": ..., "quantity": ...}]


@shop.command(part_of="Order")
class UpdateOrder:
    order_id: Identifier(required=True)
    customer_id: Identifier()
    items: Text()  # JSON: [{"shop_item_id": ..., "quantity": ...}]


@shop.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)


def load_order(order_id) -> Order:
    try:
        return current_domain.repository_for(Order).get(str(order_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError({"order_id": [f"Order {order_id} not found"]}) from exc


def _items(raw):
    return json.loads(raw) if raw else None


@shop.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        items = _items(command.items)
        enforce(IntegrityEnforcer(current_domain).check_order(command.customer_id, items))

        order = Order.place(customer_id=command.customer_id, lines=order_lines(items))
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            item_count=len(order.items),
        )
        return str(order.id)

    @handle(UpdateOrder)
    def update_order(self, command):
        items = _items(command.items)
        enforce(order_shape_violation(command.customer_id, items))
        order = load_order(command.order_id)
        enforce(IntegrityEnforcer(current_domain).check_order(command.customer_id, items))

        order.replace_items(customer_id=command.customer_id, lines=order_lines(items))
        current_domain.repository_for(Order).add(order)

        logger.info("Order items replaced", order_id=str(order.id), item_count=len(order.items))
        return str(order.id)

    @handle(DeleteOrder)
    def delete_order(self, command):
        order = load_order(command.order_id)
        current_domain.repository_for(Order).remove_order(order)

        logger.info("Order deleted", order_id=str(order.id))
        return str(order.id)
