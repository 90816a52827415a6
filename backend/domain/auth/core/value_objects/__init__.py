"""Value objects for the auth domain."""

from .biometric_key import BiometricKey
from .email import Email
from .user_id import UserId

__all__ = [
    "BiometricKey",
    "Email",
    "UserId",
]
