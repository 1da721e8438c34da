# app/api/routers/sensor.py
from datetime import datetime
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.exceptions import ValidationError
from app.services.ingestion import ingestion_service
from app.services.query import query_service
from app.schemas.common import CountResponse, ItemResponse, ListResponse, parse_timestamp
from app.schemas.sensor import SensorReadingCreate, SensorReadingRead

router = APIRouter(prefix="/api/sensor", tags=["Sensor"])


def _parse_bound(name: str, value: Optional[str]) -> Optional[datetime]:
    if value is None or value == "":
        return None
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise ValidationError(f"{name}: {e}")


# =====================================================================
# INGESTION
# =====================================================================

@router.post(
    "",
    response_model=ItemResponse[SensorReadingRead],
    status_code=status.HTTP_201_CREATED,
    summary="Store one sensor reading",
)
def create_sensor_reading(reading_data: SensorReadingCreate, db: Session = Depends(get_db)):
    reading = ingestion_service.create_sensor_reading(db, reading_data)
    return {"data": reading}


@router.post(
    "/bulk",
    response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Store a JSON array of sensor readings",
)
def bulk_create_sensor_readings(payload: Any = Body(...), db: Session = Depends(get_db)):
    """All-or-nothing: one invalid reading rejects the batch."""
    count = ingestion_service.ingest_sensor_batch(db, payload)
    return {"count": count, "message": f"{count} sensor readings stored"}


# =====================================================================
# QUERIES
# =====================================================================

@router.get("", response_model=ListResponse[SensorReadingRead], summary="Latest sensor readings")
def list_sensor_readings(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    readings = query_service.latest_sensor_readings(db, limit=settings.SENSOR_PAGE_LIMIT)
    return {"count": len(readings), "data": readings}


@router.get(
    "/{device_id}",
    response_model=ListResponse[SensorReadingRead],
    summary="Latest sensor readings for a device",
)
def get_sensor_readings_for_device(
    device_id: str,
    start: Optional[str] = Query(None, description="Inclusive lower bound on timestamp"),
    end: Optional[str] = Query(None, description="Inclusive upper bound on timestamp"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Readings for one device, newest first.

    `start` and `end` accept ISO 8601 or epoch milliseconds; either may be
    omitted to leave that side of the range open.
    """
    readings = query_service.sensor_readings_for_device(
        db,
        device_id,
        start=_parse_bound("start", start),
        end=_parse_bound("end", end),
        limit=settings.SENSOR_PAGE_LIMIT,
    )
    return {"count": len(readings), "data": readings}
