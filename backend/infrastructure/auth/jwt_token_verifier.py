"""JWT token verifier for the transport-layer guard."""

from typing import Any, Dict, List, Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError as JWTError

from domain.auth.core.exceptions.auth_errors import ConfigurationError
from infrastructure.auth.jwt_token_issuer import DEFAULT_ALGORITHM

REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class InvalidTokenError(Exception):
    """Token verification failed."""

    def __init__(self, reason: str):
        """Initialize with failure reason.

        Args:
            reason: Human-readable reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid token: {reason}")


class JwtTokenVerifier:
    """Verifies tokens produced by ``JwtTokenIssuer`` with the same secret.

    Used by ``AuthMiddleware`` only; the authentication service never decodes
    tokens.

    Examples:
        >>> verifier = JwtTokenVerifier(secret="change-me")
        >>> claims = verifier.verify(token)
        >>> claims["sub"]
        'e4b8c9d0-...'
    """

    def __init__(
        self,
        secret: str,
        algorithms: Optional[List[str]] = None,
        leeway_seconds: int = 0,
    ) -> None:
        if not secret or not secret.strip():
            raise ConfigurationError("JWT_SECRET", "verification secret is empty")
        self._secret = secret
        self.algorithms = algorithms or [DEFAULT_ALGORITHM]
        self.leeway_seconds = leeway_seconds

    def verify(self, token: str) -> Dict[str, Any]:
        """Verify signature and expiry, return claims.

        Args:
            token: Encoded JWT

        Returns:
            Decoded claims dictionary

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired
        """
        try:
            claims: Dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=self.algorithms,
                leeway=self.leeway_seconds,
                options={"require": REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        return claims
