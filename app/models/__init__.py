# app/models/__init__.py

from app.core.database import Base

# Import all models here so metadata.create_all sees every table
from .device import Device
from .sensor_reading import SensorReading
from .touch_event import TouchEvent
from .eye_tracking import EyeTrackingSample
from .app_usage import AppUsageEvent

__all__ = [
    "Base",
    "Device",
    "SensorReading",
    "TouchEvent",
    "EyeTrackingSample",
    "AppUsageEvent",
]
