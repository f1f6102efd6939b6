"""Firestore implementation of the profile record store."""

from typing import Any

from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from domain.entities.profile import ProfileRecord


class FirestoreProfileStore:
    """Firestore implementation of IProfileRecordStore.

    Documents live under ``{collection}/{user_id}``.
    """

    def __init__(self, db: AsyncClient, collection: str = "users") -> None:
        self._db = db
        self._collection = collection

    def _doc(self, user_id: str):  # type: ignore[no-untyped-def]
        return self._db.collection(self._collection).document(user_id)

    async def get(self, user_id: str) -> ProfileRecord | None:
        """Get a profile record by user ID."""
        snap = await self._doc(user_id).get()
        if not snap.exists:
            return None
        return ProfileRecord.from_document(snap.id, snap.to_dict())

    async def update_partial(self, user_id: str, fields: dict[str, Any]) -> None:
        """Update only the given fields; fails if the document does not exist."""
        await self._doc(user_id).update(fields)

    async def query_by_field(self, field_name: str, value: Any) -> list[ProfileRecord]:
        """Get all profiles whose field equals the value."""
        query = self._db.collection(self._collection).where(
            filter=FieldFilter(field_name, "==", value)
        )
        out = []
        async for snap in query.stream():
            out.append(ProfileRecord.from_document(snap.id, snap.to_dict()))
        return out

    async def ping(self) -> None:
        """Read at most one document."""
        await self._db.collection(self._collection).limit(1).get()
