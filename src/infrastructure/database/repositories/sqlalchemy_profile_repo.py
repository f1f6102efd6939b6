"""SQLAlchemy implementation of the profile record store."""

from typing import Any

from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities.profile import ProfileRecord
from infrastructure.database.models import DOCUMENT_COLUMNS, UserProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRecordStore.

    Each call runs in its own short-lived session; there is no transaction
    spanning a uniqueness query and the write that follows it.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, user_id: str) -> ProfileRecord | None:
        """Get a profile record by user ID."""
        async with self._session_factory() as session:
            model = await session.get(UserProfileModel, user_id)
            return self._to_entity(model) if model else None

    async def update_partial(self, user_id: str, fields: dict[str, Any]) -> None:
        """Overwrite the given document fields of an existing profile."""
        async with self._session_factory() as session:
            model = await session.get(UserProfileModel, user_id)
            if not model:
                raise ValueError(f"Profile {user_id} not found")

            for key, value in fields.items():
                column = DOCUMENT_COLUMNS.get(key)
                if column is None:
                    raise ValueError(f"Unknown profile field: {key}")
                setattr(model, column, value)

            await session.commit()

    async def query_by_field(self, field_name: str, value: Any) -> list[ProfileRecord]:
        """Get all profiles whose document field equals the value."""
        column = DOCUMENT_COLUMNS.get(field_name)
        if column is None:
            raise ValueError(f"Unknown profile field: {field_name}")

        stmt = select(UserProfileModel).where(getattr(UserProfileModel, column) == value)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(model) for model in result.scalars()]

    async def create(self, record: ProfileRecord) -> ProfileRecord:
        """Insert a new profile (account creation, seeding and tests)."""
        async with self._session_factory() as session:
            model = self._to_model(record)
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return self._to_entity(model)

    async def ping(self) -> None:
        """Run a trivial query."""
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))

    @staticmethod
    def _to_entity(model: UserProfileModel) -> ProfileRecord:
        """Convert ORM model to domain entity."""
        document = {key: getattr(model, column) for key, column in DOCUMENT_COLUMNS.items()}
        return ProfileRecord.from_document(model.id, document)

    @staticmethod
    def _to_model(record: ProfileRecord) -> UserProfileModel:
        """Convert domain entity to ORM model."""
        return UserProfileModel(
            id=record.user_id,
            patient_id=record.external_id or None,
            name=record.name or None,
            email=record.email or None,
            phone_number=record.phone_number or None,
            address=record.address or None,
            weight=record.weight or None,
            height=record.height or None,
        )
