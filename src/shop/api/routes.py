"""FastAPI endpoints for the shop."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from shop.api.schemas import (
    CategoryRequest,
    CategoryResponse,
    CustomerRequest,
    CustomerResponse,
    DeletedCategoryResponse,
    DeletedCustomerResponse,
    DeletedOrderResponse,
    DeletedShopItemResponse,
    OrderRequest,
    OrderResponse,
    SeedResponse,
    ShopItemRequest,
    ShopItemResponse,
)
from shop.category.category import Category
from shop.category.management import CreateCategory, DeleteCategory, UpdateCategory, load_category
from shop.customer.customer import Customer
from shop.customer.management import DeleteCustomer, RegisterCustomer, UpdateCustomer, load_customer
from shop.order import service as orders
from shop.seed import seed_demo_data
from shop.shop_item.categories import CategoryResolver
from shop.shop_item.management import CreateShopItem, DeleteShopItem, UpdateShopItem, load_shop_item
from shop.shop_item.shop_item import ShopItem
from shop.storage import process
from shop.views import category_view, customer_view, shop_item_view

customer_router = APIRouter(prefix="/api/customers", tags=["customers"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])
shop_item_router = APIRouter(prefix="/api/shop-items", tags=["shop-items"])
order_router = APIRouter(prefix="/api/orders", tags=["orders"])
seed_router = APIRouter(prefix="/api", tags=["seed"])


def _shop_item_responses(items) -> list[ShopItemResponse]:
    items = list(items)
    categories = CategoryResolver(current_domain).categories_for(items)
    return [ShopItemResponse.model_validate(shop_item_view(item, categories)) for item in items]


# --- Customer endpoints ---


@customer_router.get("", response_model=list[CustomerResponse])
async def list_customers() -> list[CustomerResponse]:
    customers = current_domain.repository_for(Customer).list_all()
    return [CustomerResponse.model_validate(customer_view(customer)) for customer in customers]


@customer_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str) -> CustomerResponse:
    return CustomerResponse.model_validate(customer_view(load_customer(customer_id)))


@customer_router.post("", status_code=201, response_model=CustomerResponse)
async def create_customer(body: CustomerRequest) -> CustomerResponse:
    customer_id = process(RegisterCustomer(name=body.name, surname=body.surname, email=body.email))
    return CustomerResponse.model_validate(customer_view(load_customer(customer_id)))


@customer_router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(customer_id: str, body: CustomerRequest) -> CustomerResponse:
    process(UpdateCustomer(customer_id=customer_id, name=body.name, surname=body.surname, email=body.email))
    return CustomerResponse.model_validate(customer_view(load_customer(customer_id)))


@customer_router.delete("/{customer_id}", response_model=DeletedCustomerResponse)
async def delete_customer(customer_id: str) -> DeletedCustomerResponse:
    customer = customer_view(load_customer(customer_id))
    process(DeleteCustomer(customer_id=customer_id))
    return DeletedCustomerResponse.model_validate({"message": "Customer deleted successfully", "customer": customer})


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    return [CategoryResponse.model_validate(category_view(category)) for category in categories]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    return CategoryResponse.model_validate(category_view(load_category(category_id)))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CategoryRequest) -> CategoryResponse:
    category_id = process(CreateCategory(title=body.title, description=body.description))
    return CategoryResponse.model_validate(category_view(load_category(category_id)))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: str, body: CategoryRequest) -> CategoryResponse:
    process(UpdateCategory(category_id=category_id, title=body.title, description=body.description))
    return CategoryResponse.model_validate(category_view(load_category(category_id)))


@category_router.delete("/{category_id}", response_model=DeletedCategoryResponse)
async def delete_category(category_id: str) -> DeletedCategoryResponse:
    category = category_view(load_category(category_id))
    process(DeleteCategory(category_id=category_id))
    return DeletedCategoryResponse.model_validate({"message": "Category deleted successfully", "category": category})


# --- Shop item endpoints ---


@shop_item_router.get("", response_model=list[ShopItemResponse])
async def list_shop_items() -> list[ShopItemResponse]:
    return _shop_item_responses(current_domain.repository_for(ShopItem).list_all())


@shop_item_router.get("/{shop_item_id}", response_model=ShopItemResponse)
async def get_shop_item(shop_item_id: str) -> ShopItemResponse:
    return _shop_item_responses([load_shop_item(shop_item_id)])[0]


@shop_item_router.post("", status_code=201, response_model=ShopItemResponse)
async def create_shop_item(body: ShopItemRequest) -> ShopItemResponse:
    command = CreateShopItem(
        title=body.title,
        description=body.description,
        price=body.price,
        category_ids=json.dumps(body.category_ids) if body.category_ids is not None else None,
    )
    shop_item_id = process(command)
    return _shop_item_responses([load_shop_item(shop_item_id)])[0]


@shop_item_router.put("/{shop_item_id}", response_model=ShopItemResponse)
async def update_shop_item(shop_item_id: str, body: ShopItemRequest) -> ShopItemResponse:
    command = UpdateShopItem(
        shop_item_id=shop_item_id,
        title=body.title,
        description=body.description,
        price=body.price,
        category_ids=json.dumps(body.category_ids) if body.category_ids is not None else None,
    )
    process(command)
    return _shop_item_responses([load_shop_item(shop_item_id)])[0]


@shop_item_router.delete("/{shop_item_id}", response_model=DeletedShopItemResponse)
async def delete_shop_item(shop_item_id: str) -> DeletedShopItemResponse:
    shop_item = _shop_item_responses([load_shop_item(shop_item_id)])[0]
    process(DeleteShopItem(shop_item_id=shop_item_id))
    return DeletedShopItemResponse(message="Shop item deleted successfully", shop_item=shop_item)


# --- Order endpoints ---


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    return [OrderResponse.model_validate(order) for order in orders.list_orders()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return OrderResponse.model_validate(orders.get_order(order_id))


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: OrderRequest) -> OrderResponse:
    return OrderResponse.model_validate(orders.create_order(body.customer_id, body.raw_items()))


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: str, body: OrderRequest) -> OrderResponse:
    return OrderResponse.model_validate(orders.update_order(order_id, body.customer_id, body.raw_items()))


@order_router.delete("/{order_id}", response_model=DeletedOrderResponse)
async def delete_order(order_id: str) -> DeletedOrderResponse:
    order = orders.delete_order(order_id)
    return DeletedOrderResponse.model_validate({"message": "Order deleted successfully", "order": order})


# --- Demo data ---


@seed_router.post("/seed", response_model=SeedResponse)
async def seed() -> SeedResponse:
    counts = seed_demo_data()
    return SeedResponse.model_validate({"message": "Database seeded successfully", **counts})
