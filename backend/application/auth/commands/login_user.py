"""Password login command."""

from dataclasses import dataclass, field
from typing import Optional

import structlog

from domain.auth.core.entities.user import User
from domain.auth.core.exceptions.auth_errors import AuthError, AuthErrorKind
from domain.auth.core.ports.credential_hasher import ICredentialHasher
from domain.auth.core.ports.token_issuer import ITokenIssuer
from domain.auth.core.ports.user_directory import IUserDirectory
from domain.auth.core.value_objects.email import Email
from domain.auth.core.value_objects.token_claims import TokenClaims

logger = structlog.get_logger(__name__)

_DECOY_PASSWORD = "decoy-password-for-unknown-accounts"


@dataclass
class LoginUserCommand:
    """Command to authenticate with email and password and issue a token.

    Unknown email and wrong password fail with the same INVALID_CREDENTIALS
    error. An unknown email is still checked against a decoy digest so both
    paths pay for one hash verification.

    Examples:
        >>> command = LoginUserCommand(directory, hasher, issuer)
        >>> token = await command.execute("mario@example.com", "s3cret!")
    """

    directory: IUserDirectory
    hasher: ICredentialHasher
    issuer: ITokenIssuer
    _decoy_digest: Optional[str] = field(default=None, init=False, repr=False)

    async def execute(self, email: str, password: str) -> str:
        """Execute login.

        Args:
            email: Registered email address
            password: Plaintext password

        Returns:
            Signed bearer token

        Raises:
            AuthError: INVALID_CREDENTIALS or LOGIN_FAILED
        """
        try:
            user = await self._find_user(email)

            if user is None:
                await self.hasher.verify(password, await self._decoy())
                raise AuthError(AuthErrorKind.INVALID_CREDENTIALS)

            if not await self.hasher.verify(password, user.password_hash):
                raise AuthError(AuthErrorKind.INVALID_CREDENTIALS)

            token = self.issuer.issue(TokenClaims.for_user(user))

        except AuthError as e:
            logger.info("login_rejected", email=email, kind=e.kind.value)
            raise

        except Exception as e:
            logger.exception("login_failed", email=email)
            raise AuthError(AuthErrorKind.LOGIN_FAILED) from e

        logger.info("user_logged_in", user_id=str(user.user_id), method="password")
        return token

    async def _find_user(self, email: str) -> Optional[User]:
        try:
            address = Email(email)
        except ValueError:
            # A malformed address can never belong to an account
            return None
        return await self.directory.find_by_email(address)

    async def _decoy(self) -> str:
        if self._decoy_digest is None:
            self._decoy_digest = await self.hasher.hash(_DECOY_PASSWORD)
        return self._decoy_digest
