"""Commands for the auth domain."""

from .register_user import REGISTRATION_CONFIRMATION, RegisterUserCommand
from .login_user import LoginUserCommand
from .biometric_login import BiometricLoginCommand

__all__ = [
    "REGISTRATION_CONFIRMATION",
    "RegisterUserCommand",
    "LoginUserCommand",
    "BiometricLoginCommand",
]
