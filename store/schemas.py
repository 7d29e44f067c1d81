"""Pydantic models for everything the store persists.

Attribute names are snake_case; the persisted JSON keeps the camelCase
field names the presentation layer reads (categoryId, userName, isAdmin...).
Always dump with `by_alias=True, exclude_none=True`.
"""

from __future__ import annotations

import threading
import time

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_id_lock = threading.Lock()
_last_id = 0


def timestamp_id() -> str:
    """Millisecond wall-clock timestamp used as a creation id.

    Strictly increasing within a process, so two creations in the same
    millisecond still get different ids.
    """
    global _last_id
    with _id_lock:
        _last_id = max(time.time_ns() // 1_000_000, _last_id + 1)
        return str(_last_id)


class StoreModel(BaseModel):
    """Base for persisted entities: camelCase aliases, either name accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Category(StoreModel):
    """A product category. Ids are never checked for uniqueness."""

    id: str
    name: str
    icon: str | None = None


class Review(StoreModel):
    """A customer review. Immutable once attached to a product."""

    id: str
    user_name: str
    rating: int = Field(ge=1, le=5)
    comment: str
    date: str
    image_url: str | None = None


class Product(StoreModel):
    """A catalog entry.

    `category_id` may point at a category that no longer exists; that is a
    valid state. `reviews` is newest first.
    """

    id: str
    title: str
    description: str
    price: float = Field(ge=0)
    old_price: float | None = None
    images: list[str] = Field(min_length=1)
    category_id: str
    features: list[str] = Field(default_factory=list)
    sales_count: int | None = None
    rating: float = 5.0
    system_requirements: str | None = None
    reviews: list[Review] | None = None


class User(StoreModel):
    """Session identity handed to callers after a credential check."""

    username: str
    is_admin: bool


class RegisteredAccount(StoreModel):
    """A sign-up record. The password is stored as entered."""

    username: str
    password: str
