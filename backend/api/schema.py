"""GraphQL schema factory.

Usage:
    from api.schema import create_schema
    schema = create_schema()
"""

import strawberry

from api.resolvers.auth import AuthMutations, AuthQueries


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with the auth resolvers."""
    return strawberry.Schema(query=AuthQueries, mutation=AuthMutations)
