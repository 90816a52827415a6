"""JWT token issuer."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from domain.auth.core.exceptions.auth_errors import ConfigurationError
from domain.auth.core.ports.token_issuer import ITokenIssuer
from domain.auth.core.value_objects.token_claims import TokenClaims
from infrastructure.config import TOKEN_LIFETIME

DEFAULT_ALGORITHM = "HS256"


class JwtTokenIssuer(ITokenIssuer):
    """HMAC-signed JWT issuer.

    Payload: ``email``, ``sub`` (user id), ``iat`` and ``exp`` (``iat`` plus
    the fixed lifetime). The secret is supplied once at construction.

    Examples:
        >>> issuer = JwtTokenIssuer(secret="change-me")
        >>> token = issuer.issue(TokenClaims("mario@example.com", "e4b8c9d0-..."))
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = TOKEN_LIFETIME,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """Initialize issuer.

        Args:
            secret: Process-wide signing secret
            lifetime: Time from issuance to expiry (default: 1h)
            algorithm: HMAC algorithm for PyJWT
            clock: Returns the current aware UTC time (defaults to system clock)

        Raises:
            ConfigurationError: If secret is empty or lifetime is not positive
        """
        if not secret or not secret.strip():
            raise ConfigurationError("JWT_SECRET", "signing secret is empty")
        if lifetime <= timedelta(0):
            raise ConfigurationError("TOKEN_LIFETIME", "must be positive")

        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue(self, claims: TokenClaims) -> str:
        """Sign claims into a JWT.

        Args:
            claims: Identity claims

        Returns:
            Encoded JWT string
        """
        issued_at = self._clock()
        payload = {
            **claims.to_payload(),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)
