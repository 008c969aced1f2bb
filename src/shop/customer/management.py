"""Customer management: commands and handlers."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from shop.customer.customer import Customer
from shop.domain import shop
from shop.exceptions import NotFoundError
from shop.integrity import IntegrityEnforcer, customer_shape_violation, enforce
from shop.order.order import Order

logger = structlog.get_logger(__name__)


@shop.command(part_of="Customer")
class RegisterCustomer:
    name: String(max_length=255)
    surname: String(max_length=255)
    email: String(max_length=255)


@shop.command(part_of="Customer")
class UpdateCustomer:
    customer_id: Identifier(required=True)
    name: String(max_length=255)
    surname: String(max_length=255)
    email: String(max_length=255)


@shop.command(part_of="Customer")
class DeleteCustomer:
    customer_id: Identifier(required=True)


def load_customer(customer_id) -> Customer:
    try:
        return current_domain.repository_for(Customer).get(str(customer_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError({"customer_id": [f"Customer {customer_id} not found"]}) from exc


@shop.command_handler(part_of=Customer)
class ManageCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        enforce(IntegrityEnforcer(current_domain).check_customer(command.name, command.surname, command.email))

        customer = Customer.register(name=command.name, surname=command.surname, email=command.email)
        current_domain.repository_for(Customer).add(customer)

        logger.info("Customer registered", customer_id=str(customer.id))
        return str(customer.id)

    @handle(UpdateCustomer)
    def update_customer(self, command):
        enforce(customer_shape_violation(command.name, command.surname, command.email))
        customer = load_customer(command.customer_id)
        enforce(
            IntegrityEnforcer(current_domain).check_customer(
                command.name, command.surname, command.email, customer_id=customer.id
            )
        )

        customer.update_contact(name=command.name, surname=command.surname, email=command.email)
        current_domain.repository_for(Customer).add(customer)
        return str(customer.id)

    @handle(DeleteCustomer)
    def delete_customer(self, command):
        customer = load_customer(command.customer_id)

        order_repo = current_domain.repository_for(Order)
        orders = order_repo.find_by_customer(customer.id)
        for order in orders:
            order_repo.remove_order(order)

        current_domain.repository_for(Customer).remove_customer(customer)

        logger.info("Customer deleted", customer_id=str(customer.id), cascaded_orders=len(orders))
        return str(customer.id)
