"""Demo data for a freshly created store."""

import json

import structlog

from shop.category.management import CreateCategory
from shop.customer.management import RegisterCustomer
from shop.order.service import create_order
from shop.shop_item.management import CreateShopItem
from shop.storage import process

logger = structlog.get_logger(__name__)

CUSTOMERS = [
    {"name": "John", "surname": "Doe", "email": "john.doe@example.com"},
    {"name": "Jane", "surname": "Smith", "email": "jane.smith@example.com"},
    {"name": "Bob", "surname": "Johnson", "email": "bob.johnson@example.com"},
]

CATEGORIES = [
    {"title": "Electronics", "description": "Electronic devices and gadgets"},
    {"title": "Clothing", "description": "Apparel and fashion items"},
    {"title": "Books", "description": "Books and educational materials"},
    {"title": "Home & Garden", "description": "Home improvement and gardening supplies"},
]

# (title, description, price, index into CATEGORIES)
SHOP_ITEMS = [
    ("Smartphone", "Latest model smartphone with advanced features", 699.99, 0),
    ("Laptop", "High-performance laptop for work and gaming", 1299.99, 0),
    ("T-Shirt", "Comfortable cotton t-shirt", 19.99, 1),
    ("Jeans", "Classic blue jeans", 49.99, 1),
    ("Programming Book", "Learn programming fundamentals", 39.99, 2),
    ("Garden Tools Set", "Complete set of garden tools", 89.99, 3),
]

# customer index -> [(shop item index, quantity)]
ORDERS = [
    (0, [(0, 1), (2, 2)]),
    (1, [(1, 1), (4, 1)]),
]


def seed_demo_data() -> dict:
    """Insert the demo catalogue, customers and orders. Returns the counts written."""
    customer_ids = [process(RegisterCustomer(**customer)) for customer in CUSTOMERS]
    category_ids = [process(CreateCategory(**category)) for category in CATEGORIES]
    shop_item_ids = [
        process(
            CreateShopItem(
                title=title,
                description=description,
                price=price,
                category_ids=json.dumps([category_ids[category]]),
            )
        )
        for title, description, price, category in SHOP_ITEMS
    ]
    for customer, lines in ORDERS:
        create_order(
            customer_ids[customer],
            [{"shop_item_id": shop_item_ids[item], "quantity": quantity} for item, quantity in lines],
        )

    counts = {
        "customers": len(customer_ids),
        "categories": len(category_ids),
        "shop_items": len(shop_item_ids),
        "orders": len(ORDERS),
    }
    logger.info("Demo data seeded", **counts)
    return counts
