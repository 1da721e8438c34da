# schemas/sensor.py
from typing import Optional
from pydantic import BaseModel, Field

from .common import TelemetryModel, TelemetryRead, Timestamp


class Vector3(BaseModel):
    """Three-axis reading (gyroscope, magnetometer)."""
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None


class SensorReadingBase(TelemetryModel):
    device_id: str = Field(..., min_length=1)
    timestamp: Optional[Timestamp] = None
    gyroscope: Optional[Vector3] = None
    magnetometer: Optional[Vector3] = None
    light_sensor: Optional[float] = None
    proximity_sensor: Optional[bool] = None


class SensorReadingCreate(SensorReadingBase):
    pass


class SensorReadingRead(SensorReadingBase, TelemetryRead):
    pass
