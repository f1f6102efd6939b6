"""Profile record store protocol."""

from typing import Any, Protocol

from domain.entities.profile import ProfileRecord


class IProfileRecordStore(Protocol):
    """Keyed-document store holding one profile document per user.

    Field names in ``update_partial`` and ``query_by_field`` are document
    keys (``phoneNumber``, ``patientID``), not entity attribute names.
    Implementations raise on transport failure.
    """

    async def get(self, user_id: str) -> ProfileRecord | None:
        """Get a profile record by its document key."""
        ...

    async def update_partial(self, user_id: str, fields: dict[str, Any]) -> None:
        """Overwrite only the given fields of an existing document."""
        ...

    async def query_by_field(self, field_name: str, value: Any) -> list[ProfileRecord]:
        """Get all records whose field equals the value."""
        ...

    async def ping(self) -> None:
        """Round-trip to the backend to check connectivity."""
        ...
