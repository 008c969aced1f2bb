"""Repository for the Category aggregate."""

from shop.category.category import Category
from shop.domain import shop


@shop.repository(part_of=Category)
class CategoryRepository:
    def list_all(self) -> list[Category]:
        return self._dao.query.order_by("created_at").all().items

    def find_many(self, category_ids) -> dict[str, Category]:
        """Fetch several categories in one query, keyed by id. Unknown ids are skipped."""
        ids = sorted({str(category_id) for category_id in category_ids})
        if not ids:
            return {}
        return {str(category.id): category for category in self._dao.query.filter(id__in=ids).all().items}

    def remove_category(self, category: Category) -> None:
        self._dao.delete(category)
