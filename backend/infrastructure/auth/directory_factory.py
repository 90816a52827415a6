"""User directory factory for environment-based selection.

This factory creates the appropriate directory implementation based on
the USER_DIRECTORY environment variable:
- "inmemory": InMemoryUserDirectory (for testing and local runs)
- "mongodb": MongoUserDirectory (for production)

Default: inmemory
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient

from domain.auth.core.exceptions.auth_errors import ConfigurationError
from domain.auth.core.ports.user_directory import IUserDirectory
from infrastructure.auth.in_memory_user_directory import InMemoryUserDirectory
from infrastructure.auth.mongo_user_directory import MongoUserDirectory
from infrastructure.config import (
    get_mongodb_database,
    get_mongodb_uri,
    get_user_directory_backend,
)


def create_user_directory() -> IUserDirectory:
    """Create user directory based on environment configuration.

    Returns:
        IUserDirectory: The configured directory implementation

    Raises:
        ConfigurationError: If the backend is unknown or MONGODB_URI is missing

    Environment Variables:
        USER_DIRECTORY: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: auth)
    """
    backend = get_user_directory_backend()

    if backend == "mongodb":
        mongo_uri = get_mongodb_uri()
        if not mongo_uri:
            raise ConfigurationError(
                "MONGODB_URI", "required when USER_DIRECTORY=mongodb"
            )

        client: AsyncIOMotorClient = AsyncIOMotorClient(mongo_uri, tz_aware=True)  # type: ignore
        return MongoUserDirectory(client[get_mongodb_database()])

    elif backend == "inmemory":
        return InMemoryUserDirectory()

    else:
        raise ConfigurationError(
            "USER_DIRECTORY",
            f"invalid value {backend!r}, expected 'inmemory' or 'mongodb'",
        )


# Singleton instance
_user_directory: Optional[IUserDirectory] = None


def get_user_directory() -> IUserDirectory:
    """Get singleton user directory instance."""
    global _user_directory

    if _user_directory is None:
        _user_directory = create_user_directory()

    return _user_directory


def reset_user_directory() -> None:
    """Reset the singleton (for testing purposes)."""
    global _user_directory
    _user_directory = None
