"""Order operations as seen by callers: commands in, assembled views out.

Every mutation re-reads the order through the view assembler after the unit
of work has committed, so stored values are what the caller gets back.
"""

import json

from protean.utils.globals import current_domain

from shop.order.locking import order_locks
from shop.order.management import CreateOrder, DeleteOrder, UpdateOrder
from shop.order.views import OrderViewAssembler
from shop.storage import process


def _encode(items):
    return json.dumps(items) if items is not None else None


def create_order(customer_id, items) -> dict:
    order_id = process(CreateOrder(customer_id=customer_id, items=_encode(items)))
    return get_order(order_id)


def update_order(order_id, customer_id, items) -> dict:
    with order_locks.hold(order_id):
        process(UpdateOrder(order_id=order_id, customer_id=customer_id, items=_encode(items)))
    return get_order(order_id)


def delete_order(order_id) -> dict:
    with order_locks.hold(order_id):
        order = get_order(order_id)
        process(DeleteOrder(order_id=order_id))
    return order


def get_order(order_id) -> dict:
    return OrderViewAssembler(current_domain).get(order_id)


def list_orders() -> list[dict]:
    return OrderViewAssembler(current_domain).list_all()
