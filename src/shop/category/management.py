"""Category management: commands and handlers."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from shop.category.category import Category
from shop.domain import shop
from shop.exceptions import NotFoundError
from shop.integrity import category_shape_violation, enforce
from shop.shop_item.categories import CategoryResolver

logger = structlog.get_logger(__name__)


@shop.command(part_of="Category")
class CreateCategory:
    title: String(max_length=255)
    description: Text()


@shop.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()


@shop.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def load_category(category_id) -> Category:
    try:
        return current_domain.repository_for(Category).get(str(category_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError({"category_id": [f"Category {category_id} not found"]}) from exc


@shop.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        enforce(category_shape_violation(command.title))

        category = Category.create(title=command.title, description=command.description)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        enforce(category_shape_violation(command.title))
        category = load_category(command.category_id)

        category.update_details(title=command.title, description=command.description)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        category = load_category(command.category_id)

        unlinked = CategoryResolver(current_domain).detach_category(category.id)
        current_domain.repository_for(Category).remove_category(category)

        logger.info("Category deleted", category_id=str(category.id), unlinked_shop_items=unlinked)
        return str(category.id)
