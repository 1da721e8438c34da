# services/ingestion.py
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import pydantic
from sqlalchemy.orm import Session

from app.core.exceptions import MalformedPayloadError, ValidationError
from app.crud.records import (
    CRUDRecord,
    crud_app_usage,
    crud_device,
    crud_eye_tracking,
    crud_sensor_reading,
    crud_touch_event,
)
from app.models import AppUsageEvent, Device, SensorReading
from app.schemas.common import parse_timestamp
from app.schemas.app_usage import AppUsageCreate
from app.schemas.device import DeviceCreate
from app.schemas.eye_tracking import EyeTrackingCreate
from app.schemas.sensor import SensorReadingCreate
from app.schemas.touch import TouchEventCreate

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=pydantic.BaseModel)


# =====================================================================
# PAYLOAD HELPERS
# =====================================================================

def _describe_errors(exc: pydantic.ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def require_array(payload: Any, field: Optional[str] = None) -> List[Any]:
    """
    Extract the array a bulk endpoint expects.

    With `field`, the payload must be an object holding an array under that
    key; without it, the payload itself must be an array.
    """
    if field is None:
        if not isinstance(payload, list):
            raise MalformedPayloadError("Invalid data format. Expected a JSON array.")
        return payload
    if not isinstance(payload, dict) or not isinstance(payload.get(field), list):
        raise MalformedPayloadError(f'Invalid data format. Expected a "{field}" array.')
    return payload[field]


def validate_batch(schema: Type[SchemaType], items: List[Any], label: str) -> List[SchemaType]:
    """Validate every element; the first failure rejects the whole batch."""
    records = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValidationError(f"{label}[{index}]: expected an object")
        try:
            records.append(schema.model_validate(item))
        except pydantic.ValidationError as e:
            raise ValidationError(f"{label}[{index}]: {_describe_errors(e)}")
    return records


def normalize_eye_tracking_timestamp(item: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse a textual timestamp into a datetime.

    Unparseable text is dropped so the stored default (now) applies; one bad
    sample must not reject the rest of the batch.
    """
    if not isinstance(item, dict) or not isinstance(item.get("timestamp"), str):
        return item
    normalized = dict(item)
    try:
        normalized["timestamp"] = parse_timestamp(item["timestamp"])
    except ValueError:
        logger.warning(f"Dropping unparseable eye-tracking timestamp {item['timestamp']!r}")
        del normalized["timestamp"]
    return normalized


# =====================================================================
# SERVICE CLASS
# =====================================================================

class IngestionService:
    """Write path: validates and normalizes payloads before storing them."""

    def __init__(self):
        self.device_crud = crud_device
        self.sensor_crud = crud_sensor_reading
        self.touch_crud = crud_touch_event
        self.eye_tracking_crud = crud_eye_tracking
        self.app_usage_crud = crud_app_usage

    def _store_batch(
        self,
        db: Session,
        crud: CRUDRecord,
        schema: Type[pydantic.BaseModel],
        items: List[Any],
        label: str,
    ) -> int:
        records = validate_batch(schema, items, label)
        count = crud.create_many(db, objs_in=records)
        logger.info(f"Stored {count} {crud.model.__tablename__} records")
        return count

    # =====================================================================
    # SINGLE RECORDS
    # =====================================================================

    def create_device(self, db: Session, device_data: DeviceCreate) -> Device:
        return self.device_crud.create(db, obj_in=device_data)

    def create_sensor_reading(self, db: Session, reading_data: SensorReadingCreate) -> SensorReading:
        return self.sensor_crud.create(db, obj_in=reading_data)

    def create_app_usage(self, db: Session, usage_data: AppUsageCreate) -> AppUsageEvent:
        return self.app_usage_crud.create(db, obj_in=usage_data)

    # =====================================================================
    # BULK RECORDS
    # =====================================================================

    def ingest_sensor_batch(self, db: Session, payload: Any) -> int:
        """Bare JSON array of sensor readings."""
        items = require_array(payload)
        return self._store_batch(db, self.sensor_crud, SensorReadingCreate, items, "readings")

    def ingest_app_usage_batch(self, db: Session, payload: Any) -> int:
        """Bare JSON array of app-usage records."""
        items = require_array(payload)
        return self._store_batch(db, self.app_usage_crud, AppUsageCreate, items, "records")

    def ingest_touch_batch(self, db: Session, payload: Any) -> int:
        """`{"touchData": [...]}`"""
        items = require_array(payload, "touchData")
        return self._store_batch(db, self.touch_crud, TouchEventCreate, items, "touchData")

    def ingest_eye_tracking_batch(self, db: Session, payload: Any) -> int:
        """`{"eyeTrackingData": [...]}`, timestamps normalized per sample."""
        items = require_array(payload, "eyeTrackingData")
        items = [normalize_eye_tracking_timestamp(item) for item in items]
        return self._store_batch(db, self.eye_tracking_crud, EyeTrackingCreate, items, "eyeTrackingData")

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def clear_touch_events(self, db: Session) -> int:
        deleted = self.touch_crud.delete_all(db)
        logger.info(f"Deleted {deleted} touch events")
        return deleted

    def clear_eye_tracking(self, db: Session) -> int:
        deleted = self.eye_tracking_crud.delete_all(db)
        logger.info(f"Deleted {deleted} eye-tracking samples")
        return deleted


ingestion_service = IngestionService()
