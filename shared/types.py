"""Shared type definitions for the GGSALE store core.

These enums inherit from both `str` and `Enum` so they can be used directly
wherever a plain key name is expected (backends, YAML config, JSON).
"""

from enum import Enum


class StorageKey(str, Enum):
    """Default key names in the key-value store.

    Every store object sharing one backing medium must agree on these:
    - categories, products, users: owned by the core repositories
    - session, cart: owned by the presentation layer, never touched here
    """

    categories = "ggsale_categories"
    products = "ggsale_products"
    users = "ggsale_users"
    session = "ggsale_user"
    cart = "ggsale_cart"
