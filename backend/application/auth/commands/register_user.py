"""Register user command."""

from dataclasses import dataclass

import structlog

from domain.auth.core.exceptions.auth_errors import (
    AuthError,
    AuthErrorKind,
    DuplicateKeyError,
)
from domain.auth.core.ports.credential_hasher import ICredentialHasher
from domain.auth.core.ports.user_directory import IUserDirectory
from domain.auth.core.value_objects.biometric_key import BiometricKey
from domain.auth.core.value_objects.email import Email

logger = structlog.get_logger(__name__)

REGISTRATION_CONFIRMATION = (
    "Registration successful! Please login with your email and password."
)


@dataclass
class RegisterUserCommand:
    """Command to register a new user with email and password.

    No token is issued: the caller logs in afterwards. The email pre-check is
    racy; a concurrent registration that wins the race makes the directory
    raise DuplicateKeyError, which is reported as EMAIL_ALREADY_REGISTERED.

    Examples:
        >>> command = RegisterUserCommand(directory, hasher)
        >>> await command.execute("mario@example.com", "s3cret!")
        'Registration successful! Please login with your email and password.'
    """

    directory: IUserDirectory
    hasher: ICredentialHasher

    async def execute(self, email: str, password: str) -> str:
        """Execute registration.

        Args:
            email: Email address, stored exactly as supplied
            password: Plaintext password (hashed before storage)

        Returns:
            Confirmation message

        Raises:
            AuthError: EMAIL_ALREADY_REGISTERED or REGISTRATION_FAILED
        """
        try:
            address = Email(email)
            if not password:
                raise ValueError("Password cannot be empty")

            if await self.directory.find_by_email(address) is not None:
                raise AuthError(AuthErrorKind.EMAIL_ALREADY_REGISTERED)

            biometric_key = BiometricKey.generate()
            password_hash = await self.hasher.hash(password)
            user = await self.directory.create(address, password_hash, biometric_key)

        except AuthError as e:
            logger.info("registration_rejected", email=email, kind=e.kind.value)
            raise

        except DuplicateKeyError as e:
            if e.field == "email":
                logger.info("registration_rejected", email=email, kind="duplicate_email_race")
                raise AuthError(AuthErrorKind.EMAIL_ALREADY_REGISTERED) from e
            # Biometric key collision: not retried
            logger.error("registration_failed", email=email, field=e.field)
            raise AuthError(AuthErrorKind.REGISTRATION_FAILED) from e

        except Exception as e:
            logger.exception("registration_failed", email=email)
            raise AuthError(AuthErrorKind.REGISTRATION_FAILED) from e

        logger.info("user_registered", user_id=str(user.user_id))
        return REGISTRATION_CONFIRMATION
