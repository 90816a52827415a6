"""User directory port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.auth.core.entities.user import User
from domain.auth.core.value_objects.email import Email
from domain.auth.core.value_objects.biometric_key import BiometricKey


class IUserDirectory(ABC):
    """Directory interface for User records.

    The directory exclusively owns the record store and is the final
    authority on email and biometric key uniqueness. Callers may pre-check
    with the finders, but ``create`` must reject duplicates atomically.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoUserDirectory(IUserDirectory):
        ...     async def create(self, email, password_hash, biometric_key):
        ...         # insert_one against unique indexes
        ...         pass
    """

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by email (exact, case-sensitive match).

        Args:
            email: Email address

        Returns:
            User entity if found, None otherwise

        Raises:
            UserDirectoryError: If the store cannot be queried
        """
        pass

    @abstractmethod
    async def find_by_biometric_key(self, biometric_key: BiometricKey) -> Optional[User]:
        """Find user by biometric key.

        Args:
            biometric_key: Key issued at registration

        Returns:
            User entity if found, None otherwise

        Raises:
            UserDirectoryError: If the store cannot be queried
        """
        pass

    @abstractmethod
    async def create(
        self,
        email: Email,
        password_hash: str,
        biometric_key: BiometricKey,
    ) -> User:
        """Create and persist a new user.

        Args:
            email: Unique email address
            password_hash: One-way password digest
            biometric_key: Unique biometric key

        Returns:
            The persisted User with its assigned id

        Raises:
            DuplicateKeyError: If email or biometric key already exists
            UserDirectoryError: If the write fails for any other reason
        """
        pass
