# schemas/touch.py
import enum
from typing import Optional

from .common import TelemetryModel, TelemetryRead, Timestamp


class TouchType(str, enum.Enum):
    tap = "tap"
    swipe = "swipe"
    longpress = "longpress"


class SwipeDirection(str, enum.Enum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"


class TouchEventBase(TelemetryModel):
    timestamp: Timestamp
    x: float
    y: float
    type: TouchType
    direction: Optional[SwipeDirection] = None
    end_x: Optional[float] = None
    end_y: Optional[float] = None
    duration_ms: Optional[float] = None
    device_id: Optional[str] = None


class TouchEventCreate(TouchEventBase):
    pass


class TouchEventRead(TouchEventBase, TelemetryRead):
    pass
