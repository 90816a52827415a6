"""Unit tests for MongoUserDirectory with a mocked Motor collection."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError, ServerSelectionTimeoutError

from domain.auth.core.exceptions.auth_errors import DuplicateKeyError, UserDirectoryError
from domain.auth.core.value_objects.biometric_key import BiometricKey
from domain.auth.core.value_objects.email import Email
from infrastructure.auth.mongo_user_directory import UNIQUE_FIELDS, MongoUserDirectory

USER_DOCUMENT = {
    "_id": "65f0c0ffee",
    "user_id": "e4b8c9d0-1234-4678-9abc-def012345678",
    "email": "mario@example.com",
    "password_hash": "$2b$04$abcdefghijklmnopqrstuu",
    "biometric_key": "bio-key-123",
    "created_at": datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
}


@pytest.fixture
def collection():
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def mongo_directory(collection):
    db = MagicMock()
    db.users = collection
    return MongoUserDirectory(db)


class TestMongoUserDirectoryLookups:
    """Test find_by_email and find_by_biometric_key."""

    @pytest.mark.asyncio
    async def test_find_by_email_maps_document(self, mongo_directory, collection):
        collection.find_one.return_value = USER_DOCUMENT

        user = await mongo_directory.find_by_email(Email("mario@example.com"))

        collection.find_one.assert_awaited_once_with({"email": "mario@example.com"})
        assert str(user.user_id) == USER_DOCUMENT["user_id"]
        assert user.email == Email("mario@example.com")
        assert user.password_hash == USER_DOCUMENT["password_hash"]
        assert user.biometric_key == BiometricKey("bio-key-123")
        assert user.created_at == USER_DOCUMENT["created_at"]

    @pytest.mark.asyncio
    async def test_find_by_email_absent(self, mongo_directory):
        assert await mongo_directory.find_by_email(Email("nobody@example.com")) is None

    @pytest.mark.asyncio
    async def test_find_by_biometric_key(self, mongo_directory, collection):
        collection.find_one.return_value = USER_DOCUMENT

        user = await mongo_directory.find_by_biometric_key(BiometricKey("bio-key-123"))

        collection.find_one.assert_awaited_once_with({"biometric_key": "bio-key-123"})
        assert user.email.value == "mario@example.com"

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_directory_error(self, mongo_directory, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(UserDirectoryError) as exc_info:
            await mongo_directory.find_by_email(Email("mario@example.com"))

        assert exc_info.value.operation == "find_by_email"

    @pytest.mark.asyncio
    async def test_record_stamped_ahead_of_local_clock_loads(self, mongo_directory, collection):
        created_at = datetime.now(timezone.utc) + timedelta(seconds=2)
        collection.find_one.return_value = {**USER_DOCUMENT, "created_at": created_at}

        user = await mongo_directory.find_by_email(Email("mario@example.com"))

        assert user.created_at == created_at

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides,missing",
        [
            ({}, "password_hash"),
            ({}, "created_at"),
            ({"email": "not-an-email"}, None),
            ({"user_id": "not-a-uuid"}, None),
        ],
    )
    async def test_malformed_document_becomes_directory_error(
        self, mongo_directory, collection, overrides, missing
    ):
        document = {**USER_DOCUMENT, **overrides}
        if missing:
            del document[missing]
        collection.find_one.return_value = document

        with pytest.raises(UserDirectoryError) as exc_info:
            await mongo_directory.find_by_biometric_key(BiometricKey("bio-key-123"))

        assert exc_info.value.operation == "find_by_biometric_key"
        assert not isinstance(exc_info.value, DuplicateKeyError)


class TestMongoUserDirectoryCreate:
    """Test create and duplicate-key mapping."""

    @pytest.mark.asyncio
    async def test_create_inserts_document(self, mongo_directory, collection):
        user = await mongo_directory.create(
            Email("mario@example.com"), "$2b$04$digest", BiometricKey("bio-key-123")
        )

        document = collection.insert_one.await_args.args[0]
        assert document == {
            "user_id": str(user.user_id),
            "email": "mario@example.com",
            "password_hash": "$2b$04$digest",
            "biometric_key": "bio-key-123",
            "created_at": user.created_at,
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field_name", ["email", "biometric_key"])
    async def test_duplicate_key_from_key_pattern(self, mongo_directory, collection, field_name):
        collection.insert_one.side_effect = MongoDuplicateKeyError(
            "E11000 duplicate key error",
            code=11000,
            details={"keyPattern": {field_name: 1}, "keyValue": {field_name: "x"}},
        )

        with pytest.raises(DuplicateKeyError) as exc_info:
            await mongo_directory.create(
                Email("mario@example.com"), "$2b$04$digest", BiometricKey("bio-key-123")
            )

        assert exc_info.value.field == field_name

    @pytest.mark.asyncio
    async def test_duplicate_key_from_index_name(self, mongo_directory, collection):
        collection.insert_one.side_effect = MongoDuplicateKeyError(
            "E11000 duplicate key error collection: auth.users index: uniq_email dup key",
            code=11000,
        )

        with pytest.raises(DuplicateKeyError) as exc_info:
            await mongo_directory.create(
                Email("mario@example.com"), "$2b$04$digest", BiometricKey("bio-key-123")
            )

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_other_driver_failure(self, mongo_directory, collection):
        collection.insert_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(UserDirectoryError) as exc_info:
            await mongo_directory.create(
                Email("mario@example.com"), "$2b$04$digest", BiometricKey("bio-key-123")
            )

        assert not isinstance(exc_info.value, DuplicateKeyError)
        assert exc_info.value.operation == "create"


@pytest.mark.asyncio
async def test_ensure_indexes_creates_unique_indexes(mongo_directory, collection):
    await mongo_directory.ensure_indexes()

    assert collection.create_index.await_count == len(UNIQUE_FIELDS)
    for call, field_name in zip(collection.create_index.await_args_list, UNIQUE_FIELDS):
        assert call.args[0] == [(field_name, 1)]
        assert call.kwargs == {"unique": True, "name": f"uniq_{field_name}"}
