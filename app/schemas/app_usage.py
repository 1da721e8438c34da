# schemas/app_usage.py
from typing import Optional
from pydantic import Field

from .common import TelemetryModel, TelemetryRead, Timestamp


class AppUsageBase(TelemetryModel):
    device_id: str = Field(..., min_length=1)
    package_name: Optional[str] = None
    app_name: Optional[str] = None
    usage_duration: Optional[float] = None
    open_count: Optional[int] = None
    timestamp: Optional[Timestamp] = None


class AppUsageCreate(AppUsageBase):
    pass


class AppUsageRead(AppUsageBase, TelemetryRead):
    pass
