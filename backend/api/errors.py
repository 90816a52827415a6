"""Translation of auth errors into GraphQL errors."""

from typing import Dict

from graphql import GraphQLError

from domain.auth.core.exceptions.auth_errors import AuthError, AuthErrorKind

ERROR_CODES: Dict[AuthErrorKind, str] = {
    AuthErrorKind.EMAIL_ALREADY_REGISTERED: "CONFLICT",
    AuthErrorKind.INVALID_CREDENTIALS: "UNAUTHENTICATED",
    AuthErrorKind.BIOMETRIC_KEY_NOT_FOUND: "UNAUTHENTICATED",
    AuthErrorKind.REGISTRATION_FAILED: "INTERNAL",
    AuthErrorKind.LOGIN_FAILED: "INTERNAL",
    AuthErrorKind.BIOMETRIC_LOGIN_FAILED: "INTERNAL",
}


def to_graphql_error(error: AuthError) -> GraphQLError:
    """Map an AuthError to a GraphQLError with ``extensions.code`` and ``kind``."""
    return GraphQLError(
        error.message,
        extensions={"code": ERROR_CODES[error.kind], "kind": error.kind.value},
    )


def bad_user_input(message: str) -> GraphQLError:
    return GraphQLError(message, extensions={"code": "BAD_USER_INPUT"})
