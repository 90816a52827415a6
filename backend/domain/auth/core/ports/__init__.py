"""Ports for the auth domain."""

from .credential_hasher import ICredentialHasher
from .token_issuer import ITokenIssuer
from .user_directory import IUserDirectory

__all__ = [
    "ICredentialHasher",
    "ITokenIssuer",
    "IUserDirectory",
]
