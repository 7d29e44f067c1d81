"""Identity repository: credential checks and sign-up.

There are no sessions or tokens. Each login is a fresh credential check and
the returned User is trusted by whoever holds it. Passwords are stored and
compared as plain text.
"""

from __future__ import annotations

import logging

from .backend import KeyValueBackend
from .collection import Collection
from .config import StoreConfig
from .errors import ValidationFailed
from .schemas import RegisteredAccount, User

logger = logging.getLogger(__name__)


def validate_registration(password: str, confirm_password: str, min_length: int = 4) -> None:
    """Check sign-up form input before calling register().

    Raises:
        ValidationFailed: If the passwords differ or the password is too short.
    """
    if password != confirm_password:
        raise ValidationFailed("confirm_password", "Passwords do not match")
    if len(password) < min_length:
        raise ValidationFailed(
            "password", f"Password must be at least {min_length} characters"
        )


class IdentityRepository:
    """The privileged account plus a collection of registered accounts."""

    def __init__(self, backend: KeyValueBackend, config: StoreConfig | None = None) -> None:
        self._config = config or StoreConfig()
        self._accounts = Collection(backend, self._config.users_key, RegisteredAccount)

    @property
    def min_password_length(self) -> int:
        return self._config.min_password_length

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the matching User, or None for invalid credentials.

        The privileged pair is checked first, and the privileged username is
        never looked up among registered accounts, whatever the password.
        """
        if username == self._config.admin_username:
            if password == self._config.admin_password:
                return User(username=username, is_admin=True)
            logger.debug("Invalid credentials for privileged account")
            return None

        for account in self._accounts.load():
            if account.username == username and account.password == password:
                return User(username=account.username, is_admin=False)

        logger.debug("Invalid credentials for %s", username)
        return None

    def register(self, username: str, password: str) -> bool:
        """Store a new account.

        Returns:
            False if the username is the privileged one or already taken
            (case-sensitive), True once the account is persisted.
        """
        if username == self._config.admin_username:
            return False

        with self._accounts.editing() as accounts:
            if any(a.username == username for a in accounts):
                return False
            accounts.append(RegisteredAccount(username=username, password=password))

        logger.info("Registered account %s", username)
        return True
