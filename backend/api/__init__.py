"""Transport layer: GraphQL schema, resolvers and request context."""
