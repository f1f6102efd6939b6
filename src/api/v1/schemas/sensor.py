"""Pydantic schemas for Sensor API."""

from pydantic import BaseModel, ConfigDict


class SensorResponse(BaseModel):
    """Schema for Sensor response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class SensorListResponse(BaseModel):
    """Schema for list of Sensors."""

    data: list[SensorResponse]
