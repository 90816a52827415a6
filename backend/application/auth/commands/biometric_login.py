"""Biometric login command."""

from dataclasses import dataclass

import structlog

from domain.auth.core.exceptions.auth_errors import AuthError, AuthErrorKind
from domain.auth.core.ports.token_issuer import ITokenIssuer
from domain.auth.core.ports.user_directory import IUserDirectory
from domain.auth.core.value_objects.biometric_key import BiometricKey
from domain.auth.core.value_objects.token_claims import TokenClaims

logger = structlog.get_logger(__name__)


@dataclass
class BiometricLoginCommand:
    """Command to authenticate with a biometric key and issue a token.

    The key is the whole credential: there is no password check and no
    challenge-response, so a leaked key grants full access to the account.

    Examples:
        >>> command = BiometricLoginCommand(directory, issuer)
        >>> token = await command.execute(user.biometric_key.value)
    """

    directory: IUserDirectory
    issuer: ITokenIssuer

    async def execute(self, biometric_key: str) -> str:
        """Execute biometric login.

        Args:
            biometric_key: Key issued at registration

        Returns:
            Signed bearer token

        Raises:
            AuthError: BIOMETRIC_KEY_NOT_FOUND or BIOMETRIC_LOGIN_FAILED
        """
        try:
            try:
                key = BiometricKey(biometric_key)
            except ValueError as e:
                raise AuthError(AuthErrorKind.BIOMETRIC_KEY_NOT_FOUND) from e

            user = await self.directory.find_by_biometric_key(key)
            if user is None:
                raise AuthError(AuthErrorKind.BIOMETRIC_KEY_NOT_FOUND)

            token = self.issuer.issue(TokenClaims.for_user(user))

        except AuthError as e:
            logger.info("biometric_login_rejected", kind=e.kind.value)
            raise

        except Exception as e:
            logger.exception("biometric_login_failed")
            raise AuthError(AuthErrorKind.BIOMETRIC_LOGIN_FAILED) from e

        logger.info(
            "user_logged_in",
            user_id=str(user.user_id),
            method="biometric",
            second_factor=False,
        )
        return token
