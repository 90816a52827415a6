"""Auth domain GraphQL queries."""

from typing import Optional

import strawberry
from strawberry.types import Info

from api.types_auth import ViewerType


@strawberry.type
class AuthQueries:
    """Read-only auth queries.

    Examples:
        query {
          ping
          me { email subjectId }
        }
    """

    @strawberry.field
    def ping(self) -> str:
        """Liveness probe for the GraphQL endpoint."""
        return "pong"

    @strawberry.field
    def me(self, info: Info) -> Optional[ViewerType]:
        """Caller identity from the bearer token.

        Returns:
            Token claims, or None for anonymous requests
        """
        claims = info.context.get("auth_claims")
        if not claims or not claims.get("sub"):
            return None

        return ViewerType(email=claims.get("email"), subject_id=claims["sub"])
