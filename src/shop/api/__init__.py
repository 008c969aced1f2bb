"""Shop API package."""

from shop.api.routes import category_router, customer_router, order_router, seed_router, shop_item_router

routers = [customer_router, category_router, shop_item_router, order_router, seed_router]

__all__ = [
    "category_router",
    "customer_router",
    "order_router",
    "routers",
    "seed_router",
    "shop_item_router",
]
