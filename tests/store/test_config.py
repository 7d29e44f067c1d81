"""Tests for store configuration."""

import os
import tempfile
from unittest import mock

from shared.types import StorageKey
from store.config import (
    ADMIN_PASSWORD,
    ADMIN_USERNAME,
    DEFAULT_QUOTA_BYTES,
    PLACEHOLDER_IMAGE,
    StoreConfig,
    load_config,
)


class TestStoreConfig:
    """Tests for StoreConfig dataclass."""

    def test_default_values(self) -> None:
        """Config has expected default values."""
        config = StoreConfig()
        assert config.storage_path is None
        assert config.quota_bytes == DEFAULT_QUOTA_BYTES
        assert config.products_key == "ggsale_products"
        assert config.categories_key == "ggsale_categories"
        assert config.users_key == "ggsale_users"
        assert config.session_key == "ggsale_user"
        assert config.cart_key == "ggsale_cart"
        assert config.placeholder_image == PLACEHOLDER_IMAGE
        assert config.admin_username == ADMIN_USERNAME
        assert config.admin_password == ADMIN_PASSWORD
        assert config.min_password_length == 4
        assert config.api_key is None

    def test_keys_match_storage_key_enum(self) -> None:
        config = StoreConfig()
        assert config.products_key == StorageKey.products
        assert config.users_key == StorageKey.users


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_with_no_args(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = load_config()
        assert config.storage_path is None
        assert config.quota_bytes == DEFAULT_QUOTA_BYTES

    def test_env_var_override(self) -> None:
        """Environment variables override defaults."""
        env = {
            "GGSALE_STORAGE_PATH": "/tmp/ggsale",
            "GGSALE_QUOTA_BYTES": "2048",
            "GGSALE_API_KEY": "env-key",
            "GGSALE_MODEL": "gemini-test",
            "GGSALE_HTTP_TIMEOUT": "2.5",
        }
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config()

        assert config.storage_path == "/tmp/ggsale"
        assert config.quota_bytes == 2048
        assert config.api_key == "env-key"
        assert config.model == "gemini-test"
        assert config.http_timeout == 2.5

    def test_admin_credentials_not_read_from_env(self) -> None:
        env = {"GGSALE_ADMIN_USERNAME": "mallory", "GGSALE_ADMIN_PASSWORD": "x"}
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config()
        assert config.admin_username == ADMIN_USERNAME

    def test_admin_credentials_injected_by_kwargs(self) -> None:
        config = load_config(admin_username="root", admin_password="secret")
        assert config.admin_username == "root"
        assert config.admin_password == "secret"

    def test_kwargs_override_env_vars(self) -> None:
        env = {"GGSALE_API_KEY": "env-key"}
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config(api_key="kwarg-key")
        assert config.api_key == "kwarg-key"

    def test_yaml_store_section(self) -> None:
        """Settings under a `store:` section are picked up."""
        yaml_content = """
store:
  storage_path: ./yaml-data
  quota_bytes: 4096
  products_key: shop_products
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            yaml_path = f.name

        try:
            with mock.patch.dict(os.environ, {}, clear=True):
                config = load_config(config_file=yaml_path)
            assert config.storage_path == "./yaml-data"
            assert config.quota_bytes == 4096
            assert config.products_key == "shop_products"
        finally:
            os.unlink(yaml_path)

    def test_yaml_top_level(self) -> None:
        yaml_content = "min_password_length: 8\n"
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            yaml_path = f.name

        try:
            config = load_config(config_file=yaml_path)
            assert config.min_password_length == 8
        finally:
            os.unlink(yaml_path)

    def test_env_vars_override_yaml(self) -> None:
        yaml_content = "store:\n  model: yaml-model\n  api_key: yaml-key\n"
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            yaml_path = f.name

        try:
            env = {"GGSALE_MODEL": "env-model"}
            with mock.patch.dict(os.environ, env, clear=True):
                config = load_config(config_file=yaml_path)
            assert config.model == "env-model"
            assert config.api_key == "yaml-key"
        finally:
            os.unlink(yaml_path)

    def test_nonexistent_yaml_file_ignored(self) -> None:
        config = load_config(config_file="/nonexistent/path.yaml")
        assert config.min_password_length == 4

    def test_none_kwargs_ignored(self) -> None:
        env = {"GGSALE_API_KEY": "env-key"}
        with mock.patch.dict(os.environ, env, clear=False):
            config = load_config(api_key=None)
        assert config.api_key == "env-key"


class TestConfigImports:
    def test_importable_from_store(self) -> None:
        from store import StoreConfig, load_config

        assert StoreConfig is not None
        assert load_config is not None
