"""Catalog repository: categories and products.

Each operation is a full read-modify-write of one key. Removing a category
never touches products, so products may keep a categoryId with no category
behind it.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from .backend import KeyValueBackend
from .collection import Collection
from .config import PLACEHOLDER_IMAGE, StoreConfig
from .errors import ValidationFailed
from .schemas import Category, Product, timestamp_id

logger = logging.getLogger(__name__)


@dataclass
class ProductDraft:
    """Raw product form input, before validation.

    Attributes:
        title: Product title. Required.
        price: Price as typed. Required, must parse as a number.
        category_id: Selected category id. Required.
        description: Free text, may be blank.
        old_price: Optional strike-through price as typed.
        image_urls: Image URLs, one per line.
        uploaded_images: Embedded image data (data: URLs), in upload order.
        features: Feature bullet points, one per line.
        system_requirements: Free text, omitted when blank.
    """

    title: str = ""
    price: str | float | int | None = None
    category_id: str = ""
    description: str = ""
    old_price: str | float | int | None = None
    image_urls: str = ""
    uploaded_images: list[str] = field(default_factory=list)
    features: str = ""
    system_requirements: str = ""


def split_lines(text: str) -> list[str]:
    """Split newline-delimited text into trimmed, non-empty entries."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def parse_price(value: str | float | int | None, field_name: str) -> float:
    """Coerce a typed price to a non-negative float.

    Raises:
        ValidationFailed: If the value is missing or not a finite number.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationFailed(field_name, f"{field_name} is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationFailed(field_name, f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationFailed(field_name, f"{field_name} must be a number")
    return max(number, 0.0)


def build_product(
    draft: ProductDraft,
    placeholder_image: str = PLACEHOLDER_IMAGE,
    product_id: str | None = None,
) -> Product:
    """Turn form input into a new Product.

    URL lines come first, then uploaded images; an empty result gets the
    placeholder image. New products start at rating 5.0 with no sales and no
    reviews.

    Raises:
        ValidationFailed: Naming the first missing or invalid field.
    """
    if not draft.title.strip():
        raise ValidationFailed("title", "title is required")
    price = parse_price(draft.price, "price")
    if not draft.category_id.strip():
        raise ValidationFailed("categoryId", "a category must be selected")

    old_price = None
    if draft.old_price is not None and str(draft.old_price).strip():
        old_price = parse_price(draft.old_price, "oldPrice")

    images = split_lines(draft.image_urls) + list(draft.uploaded_images)
    if not images:
        images = [placeholder_image]

    return Product(
        id=product_id or timestamp_id(),
        title=draft.title,
        description=draft.description or "",
        price=price,
        old_price=old_price,
        images=images,
        category_id=draft.category_id,
        features=split_lines(draft.features),
        sales_count=0,
        rating=5.0,
        system_requirements=draft.system_requirements.strip() or None,
    )


class CatalogRepository:
    """CRUD over the category and product collections."""

    def __init__(self, backend: KeyValueBackend, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._categories = Collection(backend, self._config.categories_key, Category)
        self._products = Collection(backend, self._config.products_key, Product)

    # Categories

    def list_categories(self) -> list[Category]:
        return self._categories.load()

    def add_category(self, category: Category) -> None:
        with self._categories.editing() as categories:
            categories.append(category)
        logger.info("Added category %s (%s)", category.id, category.name)

    def create_category(self, name: str) -> Category:
        """Validate a category name, assign a timestamp id and store it."""
        if not name.strip():
            raise ValidationFailed("name", "category name is required")
        category = Category(id=timestamp_id(), name=name)
        self.add_category(category)
        return category

    def remove_category(self, category_id: str) -> None:
        with self._categories.editing() as categories:
            categories[:] = [c for c in categories if c.id != category_id]

    # Products

    def list_products(self) -> list[Product]:
        return self._products.load()

    def get_product(self, product_id: str) -> Product | None:
        """Return the first product with this id, or None."""
        return next((p for p in self.list_products() if p.id == product_id), None)

    def add_product(self, product: Product) -> None:
        with self._products.editing() as products:
            products.append(product)
        logger.info("Added product %s (%s)", product.id, product.title)

    def create_product(self, draft: ProductDraft) -> Product:
        """Build a product from form input and store it."""
        product = build_product(draft, self._config.placeholder_image)
        self.add_product(product)
        return product

    def remove_product(self, product_id: str) -> None:
        with self._products.editing() as products:
            products[:] = [p for p in products if p.id != product_id]

    @contextmanager
    def edit_products(self) -> Iterator[list[Product]]:
        """Yield the product list for in-place changes, then persist it."""
        with self._products.editing() as products:
            yield products
