"""Token issuer port (interface)."""

from abc import ABC, abstractmethod

from domain.auth.core.value_objects.token_claims import TokenClaims


class ITokenIssuer(ABC):
    """Signs identity claims into an opaque bearer token.

    Tokens are verifiable with the same process-wide secret. Verification is
    the transport layer's concern and is not part of this interface.
    """

    @abstractmethod
    def issue(self, claims: TokenClaims) -> str:
        """Sign claims with issuance time and fixed expiry.

        Args:
            claims: Identity claims for the authenticated user

        Returns:
            Signed token string
        """
        pass
