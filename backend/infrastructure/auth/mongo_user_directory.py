"""MongoDB User Directory implementation."""

from typing import Any, Dict, Optional

import structlog
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, PyMongoError

from domain.auth.core.entities.user import User
from domain.auth.core.exceptions.auth_errors import DuplicateKeyError, UserDirectoryError
from domain.auth.core.ports.user_directory import IUserDirectory
from domain.auth.core.value_objects.biometric_key import BiometricKey
from domain.auth.core.value_objects.email import Email
from domain.auth.core.value_objects.user_id import UserId

logger = structlog.get_logger(__name__)

UNIQUE_FIELDS = ("email", "biometric_key", "user_id")


class MongoUserDirectory(IUserDirectory):
    """MongoDB implementation of the user directory.

    Document shape:
    - user_id: Internal UUID
    - email: Unique, as supplied
    - password_hash: bcrypt digest
    - biometric_key: Unique opaque key
    - created_at: Creation timestamp

    Uniqueness is enforced by unique indexes (see ``ensure_indexes``), so two
    concurrent inserts of the same email cannot both succeed.

    Examples:
        >>> directory = MongoUserDirectory(db)
        >>> await directory.ensure_indexes()
        >>> user = await directory.create(Email("a@b.io"), "$2b$...", BiometricKey.generate())
    """

    def __init__(self, db: Any) -> None:
        """Initialize directory with a Motor database.

        Args:
            db: Motor database instance
        """
        self.db = db
        self.collection = db.users

    async def ensure_indexes(self) -> None:
        """Create the unique indexes the directory relies on (idempotent)."""
        for field_name in UNIQUE_FIELDS:
            await self.collection.create_index(
                [(field_name, ASCENDING)], unique=True, name=f"uniq_{field_name}"
            )
        logger.info("user_directory_indexes_ready", fields=list(UNIQUE_FIELDS))

    async def find_by_email(self, email: Email) -> Optional[User]:
        return await self._find_one({"email": email.value}, "find_by_email")

    async def find_by_biometric_key(self, biometric_key: BiometricKey) -> Optional[User]:
        return await self._find_one(
            {"biometric_key": biometric_key.value}, "find_by_biometric_key"
        )

    async def create(
        self,
        email: Email,
        password_hash: str,
        biometric_key: BiometricKey,
    ) -> User:
        """Insert a new user document.

        Raises:
            DuplicateKeyError: If a unique index rejects the insert
            UserDirectoryError: On any other driver failure
        """
        user = User.create(email, password_hash, biometric_key)

        try:
            await self.collection.insert_one(self._entity_to_document(user))
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(self._duplicate_field(e)) from e
        except PyMongoError as e:
            raise UserDirectoryError("create", str(e)) from e

        return user

    async def _find_one(self, query: Dict[str, Any], operation: str) -> Optional[User]:
        try:
            document = await self.collection.find_one(query)
        except PyMongoError as e:
            raise UserDirectoryError(operation, str(e)) from e

        if not document:
            return None

        try:
            return self._document_to_entity(document)
        except (KeyError, ValueError) as e:
            logger.error("user_document_unreadable", operation=operation, error=repr(e))
            raise UserDirectoryError(operation, f"malformed user document: {e!r}") from e

    @staticmethod
    def _duplicate_field(error: MongoDuplicateKeyError) -> str:
        """Work out which unique field caused an E11000 error."""
        details = error.details or {}
        key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
        for field_name in UNIQUE_FIELDS:
            if field_name in key_pattern:
                return field_name

        message = str(error)
        for field_name in UNIQUE_FIELDS:
            if f"uniq_{field_name}" in message:
                return field_name

        return "unknown"

    @staticmethod
    def _entity_to_document(user: User) -> Dict[str, Any]:
        return {
            "user_id": str(user.user_id),
            "email": user.email.value,
            "password_hash": user.password_hash,
            "biometric_key": user.biometric_key.value,
            "created_at": user.created_at,
        }

    @staticmethod
    def _document_to_entity(document: Dict[str, Any]) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            user_id=UserId(document["user_id"]),
            email=Email(document["email"]),
            password_hash=document["password_hash"],
            biometric_key=BiometricKey(document["biometric_key"]),
            created_at=document["created_at"],
        )
