# app/schemas/__init__.py

from .common import (
    Timestamp,
    parse_timestamp,
    ensure_utc,
    ItemResponse,
    ListResponse,
    CountResponse,
)
from .device import DeviceCreate, DeviceRead
from .sensor import Vector3, SensorReadingCreate, SensorReadingRead
from .touch import TouchType, SwipeDirection, TouchEventCreate, TouchEventRead
from .eye_tracking import GazeDirection, EyeTrackingCreate, EyeTrackingRead
from .app_usage import AppUsageCreate, AppUsageRead


__all__ = [
    # Common
    "Timestamp", "parse_timestamp", "ensure_utc",
    "ItemResponse", "ListResponse", "CountResponse",

    # Record kinds
    "DeviceCreate", "DeviceRead",
    "Vector3", "SensorReadingCreate", "SensorReadingRead",
    "TouchType", "SwipeDirection", "TouchEventCreate", "TouchEventRead",
    "GazeDirection", "EyeTrackingCreate", "EyeTrackingRead",
    "AppUsageCreate", "AppUsageRead",
]
