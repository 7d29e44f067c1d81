"""Shared types and utilities for the GGSALE store core."""

from .config import (
    CONFIG_FILENAME,
    find_config_file,
    get_section,
    load_yaml_file,
    store_settings,
)
from .types import StorageKey

__all__ = [
    "StorageKey",
    "CONFIG_FILENAME",
    "find_config_file",
    "load_yaml_file",
    "get_section",
    "store_settings",
]
