"""Authentication service.

Single entry point used by the transport layer. Every failure leaves this
service as an ``AuthError`` tagged with an ``AuthErrorKind``; directory,
hasher and issuer errors never reach the caller in their native form.
"""

from domain.auth.core.ports.credential_hasher import ICredentialHasher
from domain.auth.core.ports.token_issuer import ITokenIssuer
from domain.auth.core.ports.user_directory import IUserDirectory
from application.auth.commands.register_user import RegisterUserCommand
from application.auth.commands.login_user import LoginUserCommand
from application.auth.commands.biometric_login import BiometricLoginCommand


class AuthenticationService:
    """Registration, password login and biometric login.

    Holds no per-request state; the directory is the only shared mutable
    resource and it is reached through the ``IUserDirectory`` port.

    Examples:
        >>> service = AuthenticationService(
        ...     directory=InMemoryUserDirectory(),
        ...     hasher=BcryptCredentialHasher(),
        ...     issuer=JwtTokenIssuer(secret="change-me"),
        ... )
        >>> await service.register("mario@example.com", "s3cret!")
        >>> token = await service.login("mario@example.com", "s3cret!")
    """

    def __init__(
        self,
        directory: IUserDirectory,
        hasher: ICredentialHasher,
        issuer: ITokenIssuer,
    ) -> None:
        self._register = RegisterUserCommand(directory=directory, hasher=hasher)
        self._login = LoginUserCommand(directory=directory, hasher=hasher, issuer=issuer)
        self._biometric_login = BiometricLoginCommand(directory=directory, issuer=issuer)

    async def register(self, email: str, password: str) -> str:
        """Register a new account. Returns a confirmation message, not a token."""
        return await self._register.execute(email, password)

    async def login(self, email: str, password: str) -> str:
        """Authenticate with email and password. Returns a bearer token."""
        return await self._login.execute(email, password)

    async def biometric_login(self, biometric_key: str) -> str:
        """Authenticate with a biometric key. Returns a bearer token."""
        return await self._biometric_login.execute(biometric_key)
