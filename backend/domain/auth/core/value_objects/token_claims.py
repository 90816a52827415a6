"""TokenClaims value object."""

from dataclasses import dataclass
from typing import Any, Dict

from domain.auth.core.entities.user import User


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims embedded in a bearer token.

    Built for each successful authentication and discarded once signed.

    Attributes:
        email: Authenticated user's email
        subject_id: Authenticated user's id (``sub`` claim)

    Examples:
        >>> claims = TokenClaims.for_user(user)
        >>> claims.to_payload()
        {'email': 'mario@example.com', 'sub': 'e4b8c9d0-...'}
    """

    email: str
    subject_id: str

    @staticmethod
    def for_user(user: User) -> "TokenClaims":
        return TokenClaims(email=str(user.email), subject_id=str(user.user_id))

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JWT payload shape (``email`` + ``sub``)."""
        return {"email": self.email, "sub": self.subject_id}
