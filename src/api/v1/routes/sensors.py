"""Sensor API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_sensor_service
from api.v1.schemas.sensor import SensorListResponse, SensorResponse
from domain.services.sensor_service import SensorService

router = APIRouter(prefix="/sensors", tags=["sensors"])


@router.get(
    "",
    response_model=SensorListResponse,
    summary="List paired sensors",
)
async def list_sensors(
    service: SensorService = Depends(get_sensor_service),
) -> SensorListResponse:
    """Get all paired sensors."""
    sensors = await service.list_sensors()
    return SensorListResponse(
        data=[SensorResponse(id=s.id, name=s.name) for s in sensors],
    )


@router.delete(
    "/{sensor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Forget a sensor",
    responses={
        204: {"description": "Sensor forgotten"},
        404: {"description": "Sensor not found"},
    },
)
async def forget_sensor(
    sensor_id: str,
    service: SensorService = Depends(get_sensor_service),
) -> None:
    """Remove a sensor from the paired list."""
    await service.forget_sensor(sensor_id)
