# services/query.py
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.crud.records import (
    crud_app_usage,
    crud_device,
    crud_eye_tracking,
    crud_sensor_reading,
    crud_touch_event,
)
from app.models import AppUsageEvent, Device, EyeTrackingSample, SensorReading, TouchEvent
from app.schemas.common import ensure_utc


class QueryService:
    """Read path: builds filter/sort/limit queries per record kind."""

    def __init__(self):
        self.device_crud = crud_device
        self.sensor_crud = crud_sensor_reading
        self.touch_crud = crud_touch_event
        self.eye_tracking_crud = crud_eye_tracking
        self.app_usage_crud = crud_app_usage

    # =====================================================================
    # DEVICES
    # =====================================================================

    def list_devices(self, db: Session) -> List[Device]:
        return self.device_crud.get_multi(db)

    def get_device(self, db: Session, device_id: str) -> Device:
        """
        Latest observation for a device.

        Raises:
            NotFoundError: If no record carries this device id
        """
        device = self.device_crud.get_latest(db, filters=[Device.device_id == device_id])
        if not device:
            raise NotFoundError(f"Device '{device_id}' not found")
        return device

    # =====================================================================
    # SENSOR READINGS
    # =====================================================================

    def latest_sensor_readings(self, db: Session, limit: int) -> List[SensorReading]:
        return self.sensor_crud.get_multi(db, newest_first=True, limit=limit)

    def sensor_readings_for_device(
        self,
        db: Session,
        device_id: str,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int,
    ) -> List[SensorReading]:
        """Readings for one device; both bounds are inclusive and optional."""
        filters = [SensorReading.device_id == device_id]
        if start is not None:
            filters.append(SensorReading.timestamp >= ensure_utc(start))
        if end is not None:
            filters.append(SensorReading.timestamp <= ensure_utc(end))
        return self.sensor_crud.get_multi(db, filters=filters, newest_first=True, limit=limit)

    # =====================================================================
    # TOUCH EVENTS
    # =====================================================================

    def list_touch_events(self, db: Session) -> List[TouchEvent]:
        return self.touch_crud.get_multi(db)

    def touch_events_by_type(self, db: Session, touch_type: str) -> List[TouchEvent]:
        return self.touch_crud.get_multi(db, filters=[TouchEvent.type == touch_type])

    # =====================================================================
    # EYE TRACKING
    # =====================================================================

    def list_eye_tracking_samples(self, db: Session) -> List[EyeTrackingSample]:
        return self.eye_tracking_crud.get_multi(db)

    def eye_tracking_by_direction(self, db: Session, direction: str) -> List[EyeTrackingSample]:
        return self.eye_tracking_crud.get_multi(db, filters=[EyeTrackingSample.direction == direction])

    # =====================================================================
    # APP USAGE
    # =====================================================================

    def latest_app_usage(self, db: Session, limit: int) -> List[AppUsageEvent]:
        return self.app_usage_crud.get_multi(db, newest_first=True, limit=limit)

    def app_usage_for_device(self, db: Session, device_id: str) -> List[AppUsageEvent]:
        return self.app_usage_crud.get_multi(
            db, filters=[AppUsageEvent.device_id == device_id], newest_first=True
        )


query_service = QueryService()
