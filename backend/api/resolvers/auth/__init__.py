"""Auth GraphQL resolvers."""

from .mutations import AuthMutations
from .queries import AuthQueries

__all__ = ["AuthMutations", "AuthQueries"]
