"""GGSALE store core: key-value persistence, catalog, accounts and reviews."""

from .backend import FileBackend, KeyValueBackend, MemoryBackend
from .catalog import CatalogRepository, ProductDraft, build_product
from .collection import Collection
from .config import ADMIN_PASSWORD, ADMIN_USERNAME, PLACEHOLDER_IMAGE, StoreConfig, load_config
from .describe import DescriptionGenerator, generate_description
from .errors import (
    MalformedPersistedData,
    StorageError,
    StorageQuotaExceeded,
    StoreError,
    ValidationFailed,
)
from .formatting import format_price
from .identity import IdentityRepository, validate_registration
from .reviews import ReviewAggregator, average_rating, new_review
from .schemas import Category, Product, RegisteredAccount, Review, User
from .storefront import Storefront, create_backend

__all__ = [
    # Store object
    "Storefront",
    "create_backend",
    # Configuration
    "StoreConfig",
    "load_config",
    "ADMIN_USERNAME",
    "ADMIN_PASSWORD",
    "PLACEHOLDER_IMAGE",
    # Backends
    "KeyValueBackend",
    "MemoryBackend",
    "FileBackend",
    "Collection",
    # Repositories
    "CatalogRepository",
    "IdentityRepository",
    "ReviewAggregator",
    # Models
    "Category",
    "Product",
    "Review",
    "User",
    "RegisteredAccount",
    "ProductDraft",
    # Helpers
    "build_product",
    "new_review",
    "average_rating",
    "validate_registration",
    "format_price",
    "DescriptionGenerator",
    "generate_description",
    # Errors
    "StoreError",
    "ValidationFailed",
    "StorageError",
    "StorageQuotaExceeded",
    "MalformedPersistedData",
]
