"""GraphQL types for the auth domain."""

from typing import Optional

import strawberry

from api.errors import bad_user_input
from domain.auth.core.value_objects.email import Email


@strawberry.input
class AuthInput:
    """Email and password credentials.

    Examples:
        mutation {
          login(input: { email: "mario@example.com", password: "s3cret!" })
        }
    """

    email: str
    password: str

    def validate(self) -> None:
        """Reject empty or malformed fields before reaching the service.

        Raises:
            GraphQLError: BAD_USER_INPUT
        """
        try:
            Email(self.email)
        except ValueError as e:
            raise bad_user_input(f"email: {e}") from e

        if not self.password:
            raise bad_user_input("password: must not be empty")


@strawberry.input
class BiometricLoginInput:
    """Biometric key credential.

    Examples:
        mutation {
          biometricLogin(input: { biometricKey: "Xk3..." })
        }
    """

    biometric_key: str

    def validate(self) -> None:
        if not self.biometric_key or not self.biometric_key.strip():
            raise bad_user_input("biometricKey: must not be empty")


@strawberry.type
class ViewerType:
    """Identity of the caller, read from a verified bearer token."""

    email: Optional[str]
    subject_id: str
