"""Customer aggregate root."""

from datetime import datetime

from protean.fields import DateTime, String

from shop.domain import shop


@shop.aggregate
class Customer:
    """A person who places orders.

    The identity never changes once assigned; name, surname and email are
    contact details that can be replaced. Email addresses are unique across
    customers.
    """

    name: String(required=True, max_length=255)
    surname: String(required=True, max_length=255)
    email: String(required=True, max_length=255, unique=True)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, name, surname, email):
        now = datetime.now()
        return cls(
            name=name,
            surname=surname,
            email=email,
            created_at=now,
            updated_at=now,
        )

    def update_contact(self, name, surname, email):
        self.name = name
        self.surname = surname
        self.email = email
        self.updated_at = datetime.now()
