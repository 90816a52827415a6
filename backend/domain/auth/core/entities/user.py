"""User entity - aggregate root."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from domain.auth.core.value_objects.user_id import UserId
from domain.auth.core.value_objects.email import Email
from domain.auth.core.value_objects.biometric_key import BiometricKey


@dataclass(frozen=True)
class User:
    """User aggregate root.

    A registered account that can authenticate either with email and password
    or with its biometric key. There is no update path: every field is fixed
    at registration.

    Invariants:
    - user_id is generated and immutable
    - email is unique across the directory (enforced by the directory)
    - biometric_key is unique and never empty
    - password_hash is never empty (the plaintext never reaches the entity)
    - created_at is timezone-aware UTC and, at creation, not in the future

    Examples:
        >>> user = User.create(
        ...     Email("mario@example.com"),
        ...     password_hash="$2b$12$...",
        ...     biometric_key=BiometricKey.generate(),
        ... )
        >>> user.email.value
        'mario@example.com'
    """

    user_id: UserId
    email: Email
    password_hash: str
    biometric_key: BiometricKey
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.password_hash:
            raise ValueError("password_hash cannot be empty")

    @staticmethod
    def create(
        email: Email,
        password_hash: str,
        biometric_key: BiometricKey,
        created_at: Optional[datetime] = None,
    ) -> "User":
        """Factory method to create a new user with a fresh id.

        Args:
            email: Unique email address
            password_hash: One-way digest produced by the credential hasher
            biometric_key: Unique key generated for this user
            created_at: Aware creation timestamp (defaults to now)

        Returns:
            New User instance

        Raises:
            ValueError: If password_hash is empty or created_at is in the future
        """
        now = datetime.now(timezone.utc)
        if created_at is None:
            created_at = now
        elif created_at > now:
            raise ValueError(f"created_at cannot be in the future: {created_at} > {now}")

        return User(
            user_id=UserId.generate(),
            email=email,
            password_hash=password_hash,
            biometric_key=biometric_key,
            created_at=created_at,
        )

    def __repr__(self) -> str:
        # password_hash and biometric_key are credentials
        return f"User(user_id={self.user_id!r}, email={self.email!r})"

    def __eq__(self, other: object) -> bool:
        """Equality based on user_id (aggregate identity)."""
        if not isinstance(other, User):
            return False
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)
