"""Association resolver for the shop item / category many-to-many link.

Links are replaced wholesale: the previous set is dropped and the requested
one written in full, the same way order items are handled. An empty or
missing list simply leaves the shop item without categories.
"""

import structlog

from shop.category.category import Category
from shop.integrity import IntegrityEnforcer, enforce
from shop.shop_item.shop_item import ShopItem

logger = structlog.get_logger(__name__)


class CategoryResolver:
    def __init__(self, domain):
        self._domain = domain
        self._enforcer = IntegrityEnforcer(domain)

    def validate(self, title, price, category_ids) -> None:
        """Raise for the first problem with the prospective shop item, including unknown categories."""
        enforce(self._enforcer.check_shop_item(title, price, category_ids))

    def link(self, item: ShopItem, category_ids) -> None:
        """Replace the categories of `item`; ids must already be validated."""
        item.replace_categories(category_ids or [])

    def detach_category(self, category_id) -> int:
        """Remove links to `category_id` from every shop item. Returns the number of items touched."""
        repo = self._domain.repository_for(ShopItem)
        touched = 0
        for item in repo.linked_to(category_id):
            if item.unlink_category(category_id):
                repo.add(item)
                touched += 1

        if touched:
            logger.info("Category links removed", category_id=str(category_id), shop_item_count=touched)
        return touched

    def categories_for(self, items) -> dict[str, Category]:
        """All categories linked from `items`, fetched in one lookup and keyed by id."""
        category_ids = {category_id for item in items for category_id in item.category_ids}
        return self._domain.repository_for(Category).find_many(category_ids)
