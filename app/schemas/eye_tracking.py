# schemas/eye_tracking.py
import enum
from typing import Dict, Optional

from .common import TelemetryModel, TelemetryRead, Timestamp


class GazeDirection(str, enum.Enum):
    """Gaze direction tokens. Older clients send the german words."""
    center = "center"
    left = "left"
    right = "right"
    up = "up"
    down = "down"
    oben = "oben"
    unten = "unten"
    links = "links"
    rechts = "rechts"
    mitte = "mitte"


class EyeTrackingBase(TelemetryModel):
    timestamp: Optional[Timestamp] = None
    is_user_looking: bool = True
    direction: Optional[GazeDirection] = None
    eye_position: Optional[Dict[str, float]] = None
    device_id: Optional[str] = None


class EyeTrackingCreate(EyeTrackingBase):
    pass


class EyeTrackingRead(EyeTrackingBase, TelemetryRead):
    pass
