"""Auth domain exceptions.

``AuthError`` is the only error type that crosses the authentication
service boundary. Callers branch on ``AuthError.kind``; the remaining
exceptions are raised by lower components and translated by the service.
"""

from enum import Enum
from typing import Dict, Optional


class AuthErrorKind(str, Enum):
    """Failure kinds surfaced by the authentication service."""

    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"
    REGISTRATION_FAILED = "REGISTRATION_FAILED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    LOGIN_FAILED = "LOGIN_FAILED"
    BIOMETRIC_KEY_NOT_FOUND = "BIOMETRIC_KEY_NOT_FOUND"
    BIOMETRIC_LOGIN_FAILED = "BIOMETRIC_LOGIN_FAILED"


# Public messages. Causes are chained for logs, never put in the message.
ERROR_MESSAGES: Dict[AuthErrorKind, str] = {
    AuthErrorKind.EMAIL_ALREADY_REGISTERED: "Email is already registered",
    AuthErrorKind.REGISTRATION_FAILED: "An error occurred during registration",
    AuthErrorKind.INVALID_CREDENTIALS: "Invalid email or password",
    AuthErrorKind.LOGIN_FAILED: "An error occurred during login",
    AuthErrorKind.BIOMETRIC_KEY_NOT_FOUND: "Biometric key not recognized",
    AuthErrorKind.BIOMETRIC_LOGIN_FAILED: "An error occurred during biometric login",
}


class AuthError(Exception):
    """Authentication service failure tagged with its kind.

    Examples:
        >>> try:
        ...     await service.login("mario@example.com", "wrong")
        ... except AuthError as e:
        ...     e.kind
        <AuthErrorKind.INVALID_CREDENTIALS: 'INVALID_CREDENTIALS'>
    """

    def __init__(self, kind: AuthErrorKind):
        """Initialize with error kind.

        Args:
            kind: Failure kind; determines the public message
        """
        self.kind = kind
        self.message = ERROR_MESSAGES[kind]
        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        """True for rejections caused by the request, not by the server."""
        return self.kind in (
            AuthErrorKind.EMAIL_ALREADY_REGISTERED,
            AuthErrorKind.INVALID_CREDENTIALS,
            AuthErrorKind.BIOMETRIC_KEY_NOT_FOUND,
        )


class UserDirectoryError(Exception):
    """User directory storage operation failed."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        """Initialize with failed operation.

        Args:
            operation: Directory operation name (e.g. "create")
            reason: Driver-level detail for logs
        """
        self.operation = operation
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"User directory {operation} failed{detail}")


class DuplicateKeyError(UserDirectoryError):
    """A unique field of the user record already exists."""

    def __init__(self, field: str):
        """Initialize with the conflicting field.

        Args:
            field: "email" or "biometric_key"
        """
        self.field = field
        super().__init__("create", f"duplicate {field}")


class ConfigurationError(Exception):
    """Process configuration is missing or invalid (fatal at startup)."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"Invalid configuration for {setting}: {reason}")
