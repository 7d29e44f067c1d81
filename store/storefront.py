"""The store object: one config, one backend, every repository built on them."""

from __future__ import annotations

import logging

from .backend import FileBackend, KeyValueBackend, MemoryBackend
from .catalog import CatalogRepository
from .config import StoreConfig
from .describe import DescriptionGenerator
from .identity import IdentityRepository
from .reviews import ReviewAggregator

logger = logging.getLogger(__name__)


def create_backend(config: StoreConfig) -> KeyValueBackend:
    """FileBackend when storage_path is set, otherwise an in-memory backend."""
    if config.storage_path:
        logger.debug("Using file storage at %s", config.storage_path)
        return FileBackend(config.storage_path, quota_bytes=config.quota_bytes)
    return MemoryBackend(quota_bytes=config.quota_bytes)


class Storefront:
    """Explicit replacement for module-level store state.

    Construct once per process (or per test) and pass it to whatever needs
    the catalog, accounts or reviews. Repositories created here share one
    lock per collection, so threads going through the same Storefront do not
    lose updates.

    Attributes:
        config: The configuration everything was built from.
        backend: The key-value backend in use.
        catalog: Categories and products.
        identity: Credential checks and sign-up.
        reviews: Review aggregation over the catalog.
        descriptions: Text-generation collaborator.
    """

    def __init__(
        self, config: StoreConfig | None = None, backend: KeyValueBackend | None = None
    ) -> None:
        self.config = config or StoreConfig()
        self.backend = backend if backend is not None else create_backend(self.config)
        self.catalog = CatalogRepository(self.backend, self.config)
        self.identity = IdentityRepository(self.backend, self.config)
        self.reviews = ReviewAggregator(self.catalog)
        self.descriptions = DescriptionGenerator(self.config)

    async def aclose(self) -> None:
        await self.descriptions.aclose()
