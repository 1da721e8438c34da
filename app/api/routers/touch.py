# app/api/routers/touch.py
from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.ingestion import ingestion_service
from app.services.query import query_service
from app.schemas.common import CountResponse, ListResponse
from app.schemas.touch import TouchEventRead

router = APIRouter(prefix="/api/touch", tags=["Touch"])


@router.post(
    "",
    response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Store a batch of touch events",
)
def create_touch_events(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Body: `{"touchData": [...]}`.

    Each event needs `timestamp` (epoch milliseconds), `x`, `y` and a `type`
    of tap, swipe or longpress.
    """
    count = ingestion_service.ingest_touch_batch(db, payload)
    return {"count": count, "message": f"{count} touch events stored"}


@router.get("", response_model=ListResponse[TouchEventRead], summary="List touch events")
def list_touch_events(db: Session = Depends(get_db)):
    events = query_service.list_touch_events(db)
    return {"count": len(events), "data": events}


@router.get("/type/{touch_type}", response_model=ListResponse[TouchEventRead], summary="Touch events by type")
def get_touch_events_by_type(touch_type: str, db: Session = Depends(get_db)):
    events = query_service.touch_events_by_type(db, touch_type)
    return {"count": len(events), "data": events}


@router.delete("", response_model=CountResponse, summary="Delete all touch events")
def delete_touch_events(db: Session = Depends(get_db)):
    deleted = ingestion_service.clear_touch_events(db)
    return {"count": deleted, "message": f"{deleted} touch events deleted"}
