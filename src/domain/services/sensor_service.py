"""Sensor pairing list service."""

import structlog

from core.exceptions import PermissionDeniedError, RemoteFailureError, SensorNotFoundError
from domain.entities.location import PermissionStatus
from domain.entities.sensor import Sensor
from domain.repositories.location_provider import ILocationProvider
from domain.repositories.sensor_repository import ISensorRepository

logger = structlog.get_logger()


class SensorService:
    """Service layer for the paired sensor list."""

    def __init__(
        self,
        sensors: ISensorRepository,
        location: ILocationProvider | None = None,
    ) -> None:
        self._sensors = sensors
        self._location = location

    async def list_sensors(self) -> list[Sensor]:
        """Get all paired sensors."""
        try:
            return await self._sensors.list_all()
        except Exception as exc:
            logger.error("sensor_list_failed", error=str(exc))
            raise RemoteFailureError("fetch", "Failed to fetch sensors") from exc

    async def forget_sensor(self, sensor_id: str) -> None:
        """Remove a sensor from the paired list."""
        try:
            deleted = await self._sensors.delete(sensor_id)
        except Exception as exc:
            logger.error("sensor_forget_failed", sensor_id=sensor_id, error=str(exc))
            raise RemoteFailureError("delete", "Failed to forget sensor") from exc
        if not deleted:
            raise SensorNotFoundError(sensor_id)
        logger.info("sensor_forgotten", sensor_id=sensor_id)

    async def begin_pairing(self) -> None:
        """Check the device may scan for Bluetooth sensors.

        Scanning needs foreground location permission. On success the client
        opens the system Bluetooth settings.
        """
        if self._location is None:
            return
        status = await self._location.request_foreground_permission()
        if status != PermissionStatus.GRANTED:
            raise PermissionDeniedError(
                message="Location permission is required to use Bluetooth scanning.",
            )
