"""Application layer for the auth domain."""
