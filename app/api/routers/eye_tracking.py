# app/api/routers/eye_tracking.py
from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.ingestion import ingestion_service
from app.services.query import query_service
from app.schemas.common import CountResponse, ListResponse
from app.schemas.eye_tracking import EyeTrackingRead

router = APIRouter(prefix="/api/eyetracking", tags=["Eye Tracking"])


@router.post(
    "",
    response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Store a batch of eye-tracking samples",
)
def create_eye_tracking_samples(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Body: `{"eyeTrackingData": [...]}`.

    Textual timestamps are parsed per sample; a sample whose timestamp
    cannot be parsed is stored with the current time instead.
    """
    count = ingestion_service.ingest_eye_tracking_batch(db, payload)
    return {"count": count, "message": f"{count} eye-tracking samples stored"}


@router.get("", response_model=ListResponse[EyeTrackingRead], summary="List eye-tracking samples")
def list_eye_tracking_samples(db: Session = Depends(get_db)):
    samples = query_service.list_eye_tracking_samples(db)
    return {"count": len(samples), "data": samples}


@router.get(
    "/direction/{direction}",
    response_model=ListResponse[EyeTrackingRead],
    summary="Eye-tracking samples by gaze direction",
)
def get_eye_tracking_by_direction(direction: str, db: Session = Depends(get_db)):
    """Matches the stored token exactly, e.g. `links` and `left` are distinct."""
    samples = query_service.eye_tracking_by_direction(db, direction)
    return {"count": len(samples), "data": samples}


@router.delete("", response_model=CountResponse, summary="Delete all eye-tracking samples")
def delete_eye_tracking_samples(db: Session = Depends(get_db)):
    deleted = ingestion_service.clear_eye_tracking(db)
    return {"count": deleted, "message": f"{deleted} eye-tracking samples deleted"}
