"""Unit tests for AuthMiddleware."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from infrastructure.auth.auth_middleware import AuthMiddleware
from infrastructure.auth.jwt_token_verifier import InvalidTokenError, JwtTokenVerifier


async def mock_call_next(req):
    return JSONResponse(content={"message": "success"})


class TestAuthMiddleware:
    """Test AuthMiddleware implementation."""

    @pytest.fixture
    def mock_verifier(self):
        """Create mock JwtTokenVerifier."""
        return MagicMock(spec=JwtTokenVerifier)

    @pytest.fixture
    def middleware(self, mock_verifier):
        """Create AuthMiddleware instance."""
        return AuthMiddleware(FastAPI(), verifier=mock_verifier)

    @pytest.fixture
    def mock_request(self):
        """Create mock request."""
        request = MagicMock(spec=Request)
        request.headers = {}
        request.state = MagicMock()
        return request

    @pytest.mark.asyncio
    async def test_successful_authentication(self, middleware, mock_request, mock_verifier):
        mock_request.headers = {"Authorization": "Bearer valid_token"}
        mock_claims = {"sub": "e4b8c9d0", "email": "mario@example.com"}
        mock_verifier.verify.return_value = mock_claims

        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_claims == mock_claims
        mock_verifier.verify.assert_called_once_with("valid_token")

    @pytest.mark.asyncio
    async def test_missing_header_is_anonymous(self, middleware, mock_request, mock_verifier):
        """Login endpoints are reachable without a token."""
        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_claims is None
        mock_verifier.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_header_with_auth_required(self, middleware, mock_request):
        middleware.auth_required = True

        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 401
        assert "Missing authorization token" in response.body.decode()

    @pytest.mark.asyncio
    async def test_invalid_token_is_anonymous_when_optional(
        self, middleware, mock_request, mock_verifier
    ):
        """A stale token must not block the login mutations."""
        mock_request.headers = {"Authorization": "Bearer expired_token"}
        mock_verifier.verify.side_effect = InvalidTokenError("Token has expired")

        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_claims is None

    @pytest.mark.asyncio
    async def test_invalid_token_rejected_when_required(
        self, middleware, mock_request, mock_verifier
    ):
        middleware.auth_required = True
        mock_request.headers = {"Authorization": "Bearer expired_token"}
        mock_verifier.verify.side_effect = InvalidTokenError("Token has expired")

        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 401
        body = json.loads(response.body)
        assert body["error"] == "invalid_token"
        assert "Token has expired" in body["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", ["valid_token", "Basic abc", "Bearer a b"])
    async def test_malformed_header_is_anonymous(
        self, middleware, mock_request, mock_verifier, header
    ):
        mock_request.headers = {"Authorization": header}

        response = await middleware.dispatch(mock_request, mock_call_next)

        assert response.status_code == 200
        assert mock_request.state.auth_claims is None
        mock_verifier.verify.assert_not_called()

    def test_extract_token_case_insensitive_scheme(self, middleware):
        assert middleware._extract_token("bearer abc") == "abc"
        assert middleware._extract_token("BEARER abc") == "abc"
        assert middleware._extract_token(None) is None
