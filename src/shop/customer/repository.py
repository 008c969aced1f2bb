"""Repository for the Customer aggregate."""

from shop.customer.customer import Customer
from shop.domain import shop


@shop.repository(part_of=Customer)
class CustomerRepository:
    def find_by_email(self, email: str) -> Customer | None:
        """Return the customer registered under `email`, if any."""
        results = self._dao.query.filter(email=email).all().items
        return results[0] if results else None

    def list_all(self) -> list[Customer]:
        return self._dao.query.order_by("created_at").all().items

    def find_many(self, customer_ids) -> dict[str, Customer]:
        """Fetch several customers in one query, keyed by id. Unknown ids are skipped."""
        ids = sorted({str(customer_id) for customer_id in customer_ids})
        if not ids:
            return {}
        return {str(customer.id): customer for customer in self._dao.query.filter(id__in=ids).all().items}

    def remove_customer(self, customer: Customer) -> None:
        self._dao.delete(customer)
