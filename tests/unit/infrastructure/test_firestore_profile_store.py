"""Unit tests for the Firestore profile store against a mocked client."""

from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.firestore.profile_store import FirestoreProfileStore


def _snapshot(doc_id: str, data: dict[str, Any] | None) -> MagicMock:
    snap = MagicMock()
    snap.id = doc_id
    snap.exists = data is not None
    snap.to_dict.return_value = data
    return snap


async def _stream(*snaps: MagicMock) -> AsyncIterator[MagicMock]:
    for snap in snaps:
        yield snap


@pytest.fixture
def db() -> MagicMock:
    return MagicMock()


class TestFirestoreProfileStore:
    @pytest.mark.asyncio
    async def test_get_maps_document(self, db: MagicMock) -> None:
        doc = db.collection.return_value.document.return_value
        doc.get = AsyncMock(
            return_value=_snapshot("u1", {"patientID": "P-1", "phoneNumber": "5551234567"})
        )
        store = FirestoreProfileStore(db, "users")

        record = await store.get("u1")

        db.collection.assert_called_with("users")
        db.collection.return_value.document.assert_called_with("u1")
        assert record is not None
        assert record.external_id == "P-1"
        assert record.phone_number == "5551234567"

    @pytest.mark.asyncio
    async def test_get_missing_document(self, db: MagicMock) -> None:
        db.collection.return_value.document.return_value.get = AsyncMock(
            return_value=_snapshot("u1", None)
        )
        store = FirestoreProfileStore(db)

        assert await store.get("u1") is None

    @pytest.mark.asyncio
    async def test_update_partial_sends_only_given_fields(self, db: MagicMock) -> None:
        doc = db.collection.return_value.document.return_value
        doc.update = AsyncMock()
        store = FirestoreProfileStore(db)

        await store.update_partial("u1", {"email": "a@b.co"})

        doc.update.assert_awaited_once_with({"email": "a@b.co"})

    @pytest.mark.asyncio
    async def test_query_by_field_streams_matches(self, db: MagicMock) -> None:
        query = db.collection.return_value.where.return_value
        query.stream = lambda: _stream(
            _snapshot("u1", {"email": "a@b.co"}), _snapshot("u2", {"email": "a@b.co"})
        )
        store = FirestoreProfileStore(db)

        matches = await store.query_by_field("email", "a@b.co")

        assert [m.user_id for m in matches] == ["u1", "u2"]
        field_filter = db.collection.return_value.where.call_args.kwargs["filter"]
        assert field_filter.field_path == "email"
        assert field_filter.value == "a@b.co"
