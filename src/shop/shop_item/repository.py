"""Repository for the ShopItem aggregate."""

from protean.utils.globals import current_domain

from shop.domain import shop
from shop.shop_item.shop_item import CategoryLink, ShopItem


@shop.repository(part_of=ShopItem)
class ShopItemRepository:
    def list_all(self) -> list[ShopItem]:
        return self._dao.query.order_by("created_at").all().items

    def find_many(self, shop_item_ids) -> dict[str, ShopItem]:
        """Fetch several shop items in one query, keyed by id. Unknown ids are skipped."""
        ids = sorted({str(shop_item_id) for shop_item_id in shop_item_ids})
        if not ids:
            return {}
        return {str(item.id): item for item in self._dao.query.filter(id__in=ids).all().items}

    def linked_to(self, category_id) -> list[ShopItem]:
        """Shop items carrying a link to the given category."""
        links = current_domain.repository_for(CategoryLink)._dao.query.filter(category_id=str(category_id)).all()
        shop_item_ids = {str(link.shop_item_id) for link in links.items}
        return [self.get(shop_item_id) for shop_item_id in sorted(shop_item_ids)]

    def remove_shop_item(self, item: ShopItem) -> None:
        # Links go first; not every provider cascades child rows.
        for link in list(item.category_links or []):
            item.remove_category_links(link)
        self.add(item)
        self._dao.delete(item)
