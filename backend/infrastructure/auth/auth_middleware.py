"""FastAPI authentication middleware."""

from typing import Any, Optional

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.auth.jwt_token_verifier import InvalidTokenError, JwtTokenVerifier

logger = structlog.get_logger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """FastAPI middleware for bearer token authentication.

    Verifies tokens issued by this service and sets ``request.state.auth_claims``
    for downstream handlers (``None`` for anonymous requests).

    Authentication is optional by default: ``register``, ``login`` and
    ``biometricLogin`` are called before the client has a token, or with a
    stale one it is about to replace. In optional mode a missing or invalid
    token leaves the request anonymous; with ``auth_required`` both get 401.

    Examples:
        >>> app.add_middleware(AuthMiddleware, verifier=JwtTokenVerifier(secret))
        >>> # In route handler:
        >>> claims = request.state.auth_claims
        >>> user_id = claims["sub"] if claims else None
    """

    def __init__(
        self,
        app: Any,
        verifier: JwtTokenVerifier,
        auth_required: bool = False,
    ) -> None:
        """Initialize middleware.

        Args:
            app: FastAPI application
            verifier: Token verifier sharing the issuer's secret
            auth_required: Reject requests without a token
        """
        super().__init__(app)
        self.verifier = verifier
        self.auth_required = auth_required

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        """Process request and verify bearer token.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler in chain

        Returns:
            Response from handler or 401 error
        """
        token = self._extract_token(request.headers.get("Authorization"))

        if not token:
            if self.auth_required:
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={"error": "unauthorized", "message": "Missing authorization token"},
                )
            request.state.auth_claims = None
            return await call_next(request)

        try:
            request.state.auth_claims = self.verifier.verify(token)
        except InvalidTokenError as e:
            logger.info(
                "token_rejected", reason=e.reason, auth_required=self.auth_required
            )
            if not self.auth_required:
                request.state.auth_claims = None
                return await call_next(request)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "invalid_token", "message": str(e)},
            )

        return await call_next(request)

    def _extract_token(self, auth_header: Optional[str]) -> Optional[str]:
        """Extract Bearer token from Authorization header.

        Examples:
            >>> self._extract_token("Bearer eyJ...")
            'eyJ...'
            >>> self._extract_token("eyJ...")  # Missing Bearer
            None
        """
        if not auth_header:
            return None

        parts = auth_header.split()

        if len(parts) != 2:
            return None

        scheme, token = parts

        if scheme.lower() != "bearer":
            return None

        return token
