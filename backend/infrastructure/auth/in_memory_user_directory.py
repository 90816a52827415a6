"""In-memory User Directory for testing and local runs."""

import asyncio
from typing import Dict, Optional

from domain.auth.core.entities.user import User
from domain.auth.core.exceptions.auth_errors import DuplicateKeyError
from domain.auth.core.ports.user_directory import IUserDirectory
from domain.auth.core.value_objects.biometric_key import BiometricKey
from domain.auth.core.value_objects.email import Email


class InMemoryUserDirectory(IUserDirectory):
    """In-memory implementation of the user directory.

    Keeps two indexes (email and biometric key) over the same User objects.
    ``create`` checks both indexes and inserts under one lock, which plays the
    role of a storage-level unique constraint for concurrent registrations.

    Examples:
        >>> directory = InMemoryUserDirectory()
        >>> user = await directory.create(Email("a@b.io"), "$2b$...", BiometricKey.generate())
        >>> await directory.find_by_email(Email("a@b.io")) == user
        True
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._by_email: Dict[str, User] = {}
        self._by_biometric_key: Dict[str, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: Email) -> Optional[User]:
        return self._by_email.get(email.value)

    async def find_by_biometric_key(self, biometric_key: BiometricKey) -> Optional[User]:
        return self._by_biometric_key.get(biometric_key.value)

    async def create(
        self,
        email: Email,
        password_hash: str,
        biometric_key: BiometricKey,
    ) -> User:
        """Insert a new user.

        Raises:
            DuplicateKeyError: If email or biometric key is already taken
        """
        async with self._lock:
            if email.value in self._by_email:
                raise DuplicateKeyError("email")
            if biometric_key.value in self._by_biometric_key:
                raise DuplicateKeyError("biometric_key")

            user = User.create(email, password_hash, biometric_key)
            self._by_email[email.value] = user
            self._by_biometric_key[biometric_key.value] = user
            return user

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._by_email.clear()
        self._by_biometric_key.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._by_email)
