"""Sensor repository protocol."""

from typing import Protocol

from domain.entities.sensor import Sensor


class ISensorRepository(Protocol):
    """Repository interface for paired sensors."""

    async def list_all(self) -> list[Sensor]:
        """Get all paired sensors."""
        ...

    async def get(self, sensor_id: str) -> Sensor | None:
        """Get a sensor by ID."""
        ...

    async def delete(self, sensor_id: str) -> bool:
        """Delete a sensor and return success status."""
        ...
