"""Store configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (GGSALE_*)
3. YAML config file (only when a path is passed; see shared.config.find_config_file)
4. Default values

The privileged account is compiled in and can only be replaced through
kwargs or a YAML file, never through the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shared.config import store_settings
from shared.types import StorageKey

ADMIN_USERNAME = "Sherni134356"
ADMIN_PASSWORD = "Sherni134356"

PLACEHOLDER_IMAGE = "https://picsum.photos/400/300"

# Browser local storage allows roughly 5 MiB per origin
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


@dataclass
class StoreConfig:
    """Configuration for a store object.

    Attributes:
        storage_path: Directory for FileBackend. None keeps data in memory.
        quota_bytes: Max total size of all stored entries (0 or None disables the check).
        categories_key: Key holding the category collection.
        products_key: Key holding the product collection.
        users_key: Key holding the registered accounts.
        session_key: Presentation-owned key for the signed-in user.
        cart_key: Presentation-owned key for the shopping cart.
        placeholder_image: Image substituted when a product has none.
        admin_username: Privileged account username.
        admin_password: Privileged account password.
        min_password_length: Minimum password length accepted at sign-up.
        api_key: Gemini API key. Description generation is disabled without it.
        model: Gemini model name.
        generation_base_url: Gemini REST endpoint root.
        http_timeout: Seconds before a generation request is abandoned.
    """

    storage_path: str | None = None
    quota_bytes: int | None = DEFAULT_QUOTA_BYTES
    categories_key: str = StorageKey.categories.value
    products_key: str = StorageKey.products.value
    users_key: str = StorageKey.users.value
    session_key: str = StorageKey.session.value
    cart_key: str = StorageKey.cart.value
    placeholder_image: str = PLACEHOLDER_IMAGE
    admin_username: str = ADMIN_USERNAME
    admin_password: str = ADMIN_PASSWORD
    min_password_length: int = 4
    api_key: str | None = None
    model: str = "gemini-2.5-flash"
    generation_base_url: str = "https://generativelanguage.googleapis.com"
    http_timeout: float = 30.0


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> StoreConfig:
    """Load store configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file. Settings may sit at the
            top level or under a `store:` section.
        **overrides: Direct config overrides (highest priority).

    Returns:
        StoreConfig instance.

    Example:
        # From environment variables
        config = load_config()

        # From the discovered project file
        config = load_config(find_config_file())

        # Explicit configuration
        config = load_config(storage_path="./data", quota_bytes=0)
    """
    config: dict[str, Any] = {}

    # 1. Load from YAML file (lowest priority after defaults)
    if config_file:
        config.update(store_settings(config_file))

    # 2. Override with environment variables
    env_mapping = {
        "storage_path": "GGSALE_STORAGE_PATH",
        "quota_bytes": "GGSALE_QUOTA_BYTES",
        "placeholder_image": "GGSALE_PLACEHOLDER_IMAGE",
        "api_key": "GGSALE_API_KEY",
        "model": "GGSALE_MODEL",
        "generation_base_url": "GGSALE_GENERATION_BASE_URL",
        "http_timeout": "GGSALE_HTTP_TIMEOUT",
    }

    for key, env_var in env_mapping.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    # 3. Override with explicit kwargs (highest priority)
    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    if "quota_bytes" in config and config["quota_bytes"] is not None:
        config["quota_bytes"] = int(config["quota_bytes"])
    if "min_password_length" in config:
        config["min_password_length"] = int(config["min_password_length"])
    if "http_timeout" in config:
        config["http_timeout"] = float(config["http_timeout"])
    if config.get("storage_path") is not None:
        config["storage_path"] = str(config["storage_path"])

    return StoreConfig(**config)
