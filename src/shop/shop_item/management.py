"""Shop item management: commands and handlers."""

import json

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from shop.domain import shop
from shop.exceptions import NotFoundError
from shop.integrity import enforce, shop_item_shape_violation
from shop.order.order import Order
from shop.shop_item.categories import CategoryResolver
from shop.shop_item.shop_item import ShopItem

logger = structlog.get_logger(__name__)


@shop.command(part_of="ShopItem")
class CreateShopItem:
    title: String(max_length=255)
    description: Text()
    price: Float()
    category_ids: Text()  # JSON: list of category ids


@shop.command(part_of="ShopItem")
class UpdateShopItem:
    shop_item_id: Identifier(required=True)
    title: String(max_length=255)
    description: Text()
    price: Float()
    category_ids: Text()  # JSON: list of category ids


@shop.command(part_of="ShopItem")
class DeleteShopItem:
    shop_item_id: Identifier(required=True)


def load_shop_item(shop_item_id) -> ShopItem:
    try:
        return current_domain.repository_for(ShopItem).get(str(shop_item_id))
    except ObjectNotFoundError as exc:
        raise NotFoundError({"shop_item_id": [f"Shop item {shop_item_id} not found"]}) from exc


def _category_ids(raw):
    return json.loads(raw) if raw else None


@shop.command_handler(part_of=ShopItem)
class ManageShopItemHandler:
    @handle(CreateShopItem)
    def create_shop_item(self, command):
        category_ids = _category_ids(command.category_ids)
        resolver = CategoryResolver(current_domain)
        resolver.validate(command.title, command.price, category_ids)

        item = ShopItem.create(title=command.title, description=command.description, price=command.price)
        resolver.link(item, category_ids)
        current_domain.repository_for(ShopItem).add(item)

        logger.info("Shop item created", shop_item_id=str(item.id), category_count=len(item.category_ids))
        return str(item.id)

    @handle(UpdateShopItem)
    def update_shop_item(self, command):
        category_ids = _category_ids(command.category_ids)
        enforce(shop_item_shape_violation(command.title, command.price, category_ids))
        item = load_shop_item(command.shop_item_id)

        resolver = CategoryResolver(current_domain)
        resolver.validate(command.title, command.price, category_ids)

        item.update_details(title=command.title, description=command.description, price=command.price)
        resolver.link(item, category_ids)
        current_domain.repository_for(ShopItem).add(item)
        return str(item.id)

    @handle(DeleteShopItem)
    def delete_shop_item(self, command):
        item = load_shop_item(command.shop_item_id)

        # Order lines pointing at the item go with it.
        order_repo = current_domain.repository_for(Order)
        dropped = 0
        for order in order_repo.referencing_shop_item(item.id):
            dropped += order.drop_items_for(item.id)
            order_repo.add(order)

        current_domain.repository_for(ShopItem).remove_shop_item(item)

        logger.info("Shop item deleted", shop_item_id=str(item.id), dropped_order_items=dropped)
        return str(item.id)
