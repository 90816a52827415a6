"""Entities for the auth domain."""

from .user import User

__all__ = ["User"]
