"""Tests for credential checks and sign-up."""

import json

import pytest

from store.backend import MemoryBackend
from store.config import ADMIN_PASSWORD, ADMIN_USERNAME, StoreConfig
from store.errors import ValidationFailed
from store.identity import IdentityRepository, validate_registration


@pytest.fixture
def backend() -> MemoryBackend:
    return MemoryBackend()


@pytest.fixture
def identity(backend) -> IdentityRepository:
    return IdentityRepository(backend)


class TestAuthenticate:
    def test_privileged_account(self, identity) -> None:
        user = identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
        assert user.username == ADMIN_USERNAME
        assert user.is_admin is True

    def test_privileged_wins_over_registered_account(self, identity, backend) -> None:
        backend.write(
            "ggsale_users",
            json.dumps([{"username": ADMIN_USERNAME, "password": "other"}]),
        )
        assert identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD).is_admin is True
        assert identity.authenticate(ADMIN_USERNAME, "other") is None

    def test_registered_account(self, identity) -> None:
        assert identity.register("alice", "p1") is True
        user = identity.authenticate("alice", "p1")
        assert user.username == "alice"
        assert user.is_admin is False

    def test_wrong_password(self, identity) -> None:
        identity.register("alice", "p1")
        assert identity.authenticate("alice", "P1") is None

    def test_case_sensitive_username(self, identity) -> None:
        identity.register("alice", "p1")
        assert identity.authenticate("Alice", "p1") is None

    def test_unknown_user(self, identity) -> None:
        assert identity.authenticate("nobody", "x") is None

    def test_malformed_accounts_read_as_empty(self, identity, backend) -> None:
        backend.write("ggsale_users", "][")
        assert identity.authenticate("alice", "p1") is None
        assert identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD).is_admin is True

    def test_user_serializes_like_session_value(self, identity) -> None:
        user = identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
        assert user.model_dump(by_alias=True) == {
            "username": ADMIN_USERNAME,
            "isAdmin": True,
        }


class TestRegister:
    def test_privileged_username_rejected(self, identity, backend) -> None:
        assert identity.register(ADMIN_USERNAME, "anything") is False
        assert backend.read("ggsale_users") is None

    def test_duplicate_rejected(self, identity) -> None:
        assert identity.register("alice", "p1") is True
        assert identity.register("alice", "p2") is False
        assert identity.authenticate("alice", "p1") is not None
        assert identity.authenticate("alice", "p2") is None

    def test_case_variant_allowed(self, identity) -> None:
        assert identity.register("alice", "p1") is True
        assert identity.register("Alice", "p2") is True

    def test_stored_as_plain_text(self, identity, backend) -> None:
        identity.register("alice", "p1")
        assert json.loads(backend.read("ggsale_users")) == [
            {"username": "alice", "password": "p1"}
        ]

    def test_injected_privileged_account(self, backend) -> None:
        identity = IdentityRepository(
            backend, StoreConfig(admin_username="root", admin_password="toor")
        )
        assert identity.register("root", "x") is False
        assert identity.authenticate("root", "toor").is_admin is True
        assert identity.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD) is None
        assert identity.register(ADMIN_USERNAME, "x") is True


class TestValidateRegistration:
    def test_accepts_matching_passwords(self) -> None:
        validate_registration("secret", "secret")

    def test_mismatch(self) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            validate_registration("secret", "secreT")
        assert exc_info.value.field == "confirm_password"

    def test_too_short(self) -> None:
        with pytest.raises(ValidationFailed) as exc_info:
            validate_registration("abc", "abc")
        assert exc_info.value.field == "password"

    def test_custom_min_length(self) -> None:
        with pytest.raises(ValidationFailed):
            validate_registration("abcdef", "abcdef", min_length=8)
