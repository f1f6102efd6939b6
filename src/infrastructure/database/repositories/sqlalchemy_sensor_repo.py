"""SQLAlchemy implementation of Sensor repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities.sensor import Sensor
from infrastructure.database.models import SensorModel


class SQLAlchemySensorRepository:
    """SQLAlchemy implementation of ISensorRepository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_all(self) -> list[Sensor]:
        """Get all sensors ordered by pairing time."""
        stmt = select(SensorModel).order_by(SensorModel.created_at, SensorModel.id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(model) for model in result.scalars()]

    async def get(self, sensor_id: str) -> Sensor | None:
        """Get a sensor by ID."""
        async with self._session_factory() as session:
            model = await session.get(SensorModel, sensor_id)
            return self._to_entity(model) if model else None

    async def create(self, sensor: Sensor) -> Sensor:
        """Register a paired sensor."""
        async with self._session_factory() as session:
            model = SensorModel(id=sensor.id, name=sensor.name)
            session.add(model)
            await session.commit()
            return self._to_entity(model)

    async def delete(self, sensor_id: str) -> bool:
        """Delete a sensor."""
        async with self._session_factory() as session:
            model = await session.get(SensorModel, sensor_id)
            if not model:
                return False
            await session.delete(model)
            await session.commit()
            return True

    @staticmethod
    def _to_entity(model: SensorModel) -> Sensor:
        """Convert ORM model to domain entity."""
        return Sensor(id=model.id, name=model.name or "")
