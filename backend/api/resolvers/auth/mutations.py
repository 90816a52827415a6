"""Auth domain GraphQL mutations."""

import strawberry
from strawberry.types import Info

from api.errors import to_graphql_error
from api.types_auth import AuthInput, BiometricLoginInput
from application.auth.service import AuthenticationService
from domain.auth.core.exceptions.auth_errors import AuthError


def _get_service(info: Info) -> AuthenticationService:
    service = info.context.get("auth_service")
    if not service:
        raise RuntimeError("auth_service not found in context")
    return service


@strawberry.type
class AuthMutations:
    """Registration and login mutations.

    None of these require a bearer token.

    Examples:
        mutation {
          register(input: { email: "mario@example.com", password: "s3cret!" })
        }
    """

    @strawberry.mutation
    async def register(self, info: Info, input: AuthInput) -> str:
        """Register a new account.

        Returns:
            Confirmation message (log in afterwards to get a token)

        Raises:
            GraphQLError: BAD_USER_INPUT, CONFLICT or INTERNAL
        """
        input.validate()
        try:
            return await _get_service(info).register(input.email, input.password)
        except AuthError as e:
            raise to_graphql_error(e) from e

    @strawberry.mutation
    async def login(self, info: Info, input: AuthInput) -> str:
        """Log in with email and password.

        Returns:
            Bearer token valid for one hour

        Raises:
            GraphQLError: BAD_USER_INPUT, UNAUTHENTICATED or INTERNAL
        """
        input.validate()
        try:
            return await _get_service(info).login(input.email, input.password)
        except AuthError as e:
            raise to_graphql_error(e) from e

    @strawberry.mutation
    async def biometric_login(self, info: Info, input: BiometricLoginInput) -> str:
        """Log in with the biometric key issued at registration.

        Returns:
            Bearer token valid for one hour

        Raises:
            GraphQLError: BAD_USER_INPUT, UNAUTHENTICATED or INTERNAL
        """
        input.validate()
        try:
            return await _get_service(info).biometric_login(input.biometric_key)
        except AuthError as e:
            raise to_graphql_error(e) from e
