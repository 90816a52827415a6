"""Shared test fixtures.

Unit tests build the service from in-memory collaborators; no MongoDB or
network access is needed. bcrypt runs at its minimum cost factor to keep the
suite fast.
"""

from __future__ import annotations

from typing import Generator

import pytest

from application.auth.service import AuthenticationService
from infrastructure.auth.bcrypt_hasher import BcryptCredentialHasher
from infrastructure.auth.directory_factory import reset_user_directory
from infrastructure.auth.in_memory_user_directory import InMemoryUserDirectory
from infrastructure.auth.jwt_token_issuer import JwtTokenIssuer

TEST_SECRET = "test-signing-secret-0123456789abcdef0123456789"
FAST_BCRYPT_ROUNDS = 4


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    """Create fresh in-memory directory."""
    return InMemoryUserDirectory()


@pytest.fixture
def hasher() -> BcryptCredentialHasher:
    """Create bcrypt hasher with minimum cost."""
    return BcryptCredentialHasher(rounds=FAST_BCRYPT_ROUNDS)


@pytest.fixture
def issuer() -> JwtTokenIssuer:
    """Create JWT issuer with the test secret."""
    return JwtTokenIssuer(secret=TEST_SECRET)


@pytest.fixture
def service(
    directory: InMemoryUserDirectory,
    hasher: BcryptCredentialHasher,
    issuer: JwtTokenIssuer,
) -> AuthenticationService:
    """Create authentication service wired to in-memory collaborators."""
    return AuthenticationService(directory=directory, hasher=hasher, issuer=issuer)


@pytest.fixture
def auth_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Environment for building the app: test secret, in-memory directory."""
    monkeypatch.setenv("JWT_SECRET", TEST_SECRET)
    monkeypatch.setenv("USER_DIRECTORY", "inmemory")
    monkeypatch.setenv("BCRYPT_ROUNDS", str(FAST_BCRYPT_ROUNDS))
    reset_user_directory()
    yield
    reset_user_directory()


@pytest.fixture
def secret() -> str:
    """Signing secret shared by the test issuer and verifier."""
    return TEST_SECRET
