"""Infrastructure adapters for the auth domain."""
