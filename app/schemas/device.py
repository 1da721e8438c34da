# schemas/device.py
from typing import Optional
from pydantic import Field

from .common import TelemetryModel, TelemetryRead, Timestamp


class DeviceBase(TelemetryModel):
    """Device metadata reported by the client app."""
    device_id: str = Field(..., min_length=1)
    model: Optional[str] = None
    manufacturer: Optional[str] = None
    os_version: Optional[str] = None
    screen_brightness: Optional[float] = None
    screen_orientation: Optional[str] = None
    one_hand_mode: Optional[bool] = None
    dominant_hand: Optional[str] = None
    timestamp: Optional[Timestamp] = None


class DeviceCreate(DeviceBase):
    pass


class DeviceRead(DeviceBase, TelemetryRead):
    pass
