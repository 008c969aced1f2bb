"""Category aggregate root for grouping shop items."""

from datetime import datetime

from protean.fields import DateTime, String, Text

from shop.domain import shop


@shop.aggregate
class Category:
    """A label shop items can be filed under.

    Categories are independent of shop items: the link between the two is
    owned by the shop item, so removing a category only removes those links.
    """

    title: String(required=True, max_length=255)
    description: Text()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, title, description=None):
        now = datetime.now()
        return cls(
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
        )

    def update_details(self, title, description=None):
        self.title = title
        self.description = description
        self.updated_at = datetime.now()
