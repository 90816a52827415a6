"""GraphQL context factory for dependency injection."""

from typing import Any, Dict, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.auth.service import AuthenticationService


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using ``info.context.get("name")``.

    Attributes:
        auth_service: Authentication service
        request: FastAPI request object
        auth_claims: Verified token claims from AuthMiddleware (None if anonymous)
    """

    def __init__(
        self,
        auth_service: AuthenticationService,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.auth_service = auth_service
        self.request = request
        self.auth_claims: Optional[Dict[str, Any]] = (
            getattr(request.state, "auth_claims", None) if request else None
        )

    def get(self, key: str) -> Any:
        """Get dependency by name (for resolver compatibility).

        Example:
            >>> service = info.context.get("auth_service")
        """
        return getattr(self, key, None)


def create_context(
    auth_service: AuthenticationService,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies."""
    return GraphQLContext(auth_service=auth_service, request=request)
