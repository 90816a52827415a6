"""Domain exceptions for auth."""

from .auth_errors import (
    AuthError,
    AuthErrorKind,
    ConfigurationError,
    DuplicateKeyError,
    UserDirectoryError,
)

__all__ = [
    "AuthError",
    "AuthErrorKind",
    "ConfigurationError",
    "DuplicateKeyError",
    "UserDirectoryError",
]
