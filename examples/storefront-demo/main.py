#!/usr/bin/env python3
"""Example: seed and browse a GGSALE catalog from the command line.

Usage:
    # In-memory store (nothing kept after exit)
    python main.py

    # Persist to a directory, optionally with an API key for descriptions
    GGSALE_STORAGE_PATH=/tmp/ggsale GGSALE_API_KEY=... python main.py
"""

import asyncio
import logging
import sys

from shared import find_config_file
from store import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    ProductDraft,
    StorageQuotaExceeded,
    Storefront,
    ValidationFailed,
    format_price,
    load_config,
    new_review,
)

from data import CATEGORIES, PRODUCTS, REVIEWS


async def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = load_config(find_config_file())
    shop = Storefront(config)

    admin = shop.identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
    print(f"Signed in as {admin.username} (admin={admin.is_admin})")

    category_ids = {}
    for name in CATEGORIES:
        category_ids[name] = shop.catalog.create_category(name).id

    try:
        for item in PRODUCTS:
            keywords = item["features"].replace("\n", ", ")
            description = item["description"] or await shop.descriptions.generate(
                item["title"], item["category"], keywords
            )
            shop.catalog.create_product(
                ProductDraft(
                    title=item["title"],
                    price=item["price"],
                    category_id=category_ids[item["category"]],
                    description=description,
                    image_urls=item["image_urls"],
                    features=item["features"],
                    system_requirements=item["system_requirements"],
                )
            )
    except ValidationFailed as e:
        print(f"Invalid product ({e.field}): {e.message}")
        return 1
    except StorageQuotaExceeded as e:
        print(f"Storage full: {e}")
        return 1
    finally:
        await shop.aclose()

    first = shop.catalog.list_products()[0]
    for user_name, rating, comment in REVIEWS:
        first = shop.reviews.add_review(first.id, new_review(user_name, rating, comment))

    print("=" * 60)
    for product in shop.catalog.list_products():
        print(f"{product.title:<30} {format_price(product.price):>12}  rating {product.rating}")
        for review in product.reviews or []:
            print(f"    {review.rating}/5 {review.user_name}: {review.comment}")

    # Categories can go away while their products stay listed
    shop.catalog.remove_category(category_ids["Software"])
    print("=" * 60)
    print(f"{len(shop.catalog.list_categories())} categories, "
          f"{len(shop.catalog.list_products())} products")

    print(f"Register 'alice': {shop.identity.register('alice', 'p1')}")
    print(f"Register 'alice' again: {shop.identity.register('alice', 'p2')}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
