"""ShopItem aggregate root and its category links."""

from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, String, Text

from shop.domain import shop


@shop.entity(part_of="ShopItem")
class CategoryLink:
    """One row of the shop item / category association."""

    category_id = Identifier(required=True)


@shop.aggregate
class ShopItem:
    """Something a customer can order.

    A shop item may sit in any number of categories. The links are child
    entities of the shop item, so replacing the category set is persisted
    together with the item itself.
    """

    title = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    category_links = HasMany(CategoryLink)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def create(cls, title, price, description=None):
        """A new shop item with no categories; links are set with `replace_categories`."""
        now = datetime.now()
        return cls(
            title=title,
            description=description,
            price=price,
            created_at=now,
            updated_at=now,
        )

    @property
    def category_ids(self) -> list[str]:
        return [str(link.category_id) for link in self.category_links or []]

    def update_details(self, title, price, description=None):
        if price is not None and price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        self.title = title
        self.description = description
        self.price = price
        self.updated_at = datetime.now()

    def replace_categories(self, category_ids):
        """Drop every existing link and link the given categories instead.

        Repeated ids are linked once; order of first appearance is kept.
        """
        for link in list(self.category_links or []):
            self.remove_category_links(link)

        seen = set()
        for category_id in category_ids:
            key = str(category_id)
            if key in seen:
                continue
            seen.add(key)
            self.add_category_links(CategoryLink(category_id=key))

        self.updated_at = datetime.now()

    def unlink_category(self, category_id) -> bool:
        """Remove the link to `category_id`. Returns whether a link existed."""
        links = [link for link in self.category_links or [] if str(link.category_id) == str(category_id)]
        for link in links:
            self.remove_category_links(link)
        if links:
            self.updated_at = datetime.now()
        return bool(links)
