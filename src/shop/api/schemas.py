"""Pydantic request/response schemas for the shop API.

JSON bodies use camelCase keys; snake_case is accepted on input as well.
Request fields are optional at this layer so that missing or out-of-range
values reach the domain and come back as a 400 with a field-level message.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ShopModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---


class CustomerRequest(ShopModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "Ann", "surname": "Lee", "email": "ann@example.com"}]}
    )

    name: str | None = None
    surname: str | None = None
    email: str | None = None


class CategoryRequest(ShopModel):
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"title": "Stationery", "description": "Pens, paper and the like"}]}
    )

    title: str | None = None
    description: str | None = None


class ShopItemRequest(ShopModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "title": "Pen",
                    "description": "Blue ballpoint",
                    "price": 1.5,
                    "categoryIds": ["c1f0e3a2-0000-4000-8000-000000000001"],
                }
            ]
        }
    )

    title: str | None = None
    description: str | None = None
    price: Any = None
    category_ids: list[str] | None = None


class OrderLineRequest(ShopModel):
    shop_item_id: str | None = None
    quantity: Any = None


class OrderRequest(ShopModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "customerId": "a3b4c5d6-0000-4000-8000-000000000001",
                    "items": [{"shopItemId": "e7f8a9b0-0000-4000-8000-000000000002", "quantity": 3}],
                }
            ]
        }
    )

    customer_id: str | None = None
    items: list[OrderLineRequest] | None = None

    def raw_items(self) -> list[dict] | None:
        if self.items is None:
            return None
        return [line.model_dump() for line in self.items]


# --- Responses ---


class CustomerResponse(ShopModel):
    id: str
    name: str
    surname: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CustomerSummary(ShopModel):
    id: str
    name: str
    surname: str
    email: str


class CategoryResponse(ShopModel):
    id: str
    title: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CategorySummary(ShopModel):
    id: str
    title: str
    description: str | None = None


class ShopItemResponse(ShopModel):
    id: str
    title: str
    description: str | None = None
    price: float
    categories: list[CategorySummary] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderItemResponse(ShopModel):
    id: str
    quantity: int
    shop_item_id: str
    shop_item: ShopItemResponse | None = None


class OrderResponse(ShopModel):
    id: str
    customer_id: str
    customer: CustomerSummary | None = None
    items: list[OrderItemResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeletedCustomerResponse(ShopModel):
    message: str
    customer: CustomerResponse


class DeletedCategoryResponse(ShopModel):
    message: str
    category: CategoryResponse


class DeletedShopItemResponse(ShopModel):
    message: str
    shop_item: ShopItemResponse


class DeletedOrderResponse(ShopModel):
    message: str
    order: OrderResponse


class SeedResponse(ShopModel):
    message: str
    customers: int
    categories: int
    shop_items: int
    orders: int
