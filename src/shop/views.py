"""Flat read representations of the catalogue and customer records."""


def customer_view(customer) -> dict:
    return {
        "id": str(customer.id),
        "name": customer.name,
        "surname": customer.surname,
        "email": customer.email,
        "created_at": customer.created_at,
        "updated_at": customer.updated_at,
    }


def category_view(category) -> dict:
    return {
        "id": str(category.id),
        "title": category.title,
        "description": category.description,
        "created_at": category.created_at,
        "updated_at": category.updated_at,
    }


def shop_item_view(item, categories_by_id) -> dict:
    """Render a shop item with the categories it links to.

    Links whose category no longer exists are left out.
    """
    return {
        "id": str(item.id),
        "title": item.title,
        "description": item.description,
        "price": item.price,
        "categories": [
            {
                "id": str(category.id),
                "title": category.title,
                "description": category.description,
            }
            for category in (categories_by_id.get(category_id) for category_id in item.category_ids)
            if category is not None
        ],
        "created_at": item.created_at,
        "updated_at": item.updated_at,
    }
