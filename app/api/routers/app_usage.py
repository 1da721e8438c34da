# app/api/routers/app_usage.py
from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.services.ingestion import ingestion_service
from app.services.query import query_service
from app.schemas.common import CountResponse, ItemResponse, ListResponse
from app.schemas.app_usage import AppUsageCreate, AppUsageRead

router = APIRouter(prefix="/api/appusage", tags=["App Usage"])


@router.post(
    "",
    response_model=ItemResponse[AppUsageRead],
    status_code=status.HTTP_201_CREATED,
    summary="Store one app-usage record",
)
def create_app_usage(usage_data: AppUsageCreate, db: Session = Depends(get_db)):
    usage = ingestion_service.create_app_usage(db, usage_data)
    return {"data": usage}


@router.post(
    "/bulk",
    response_model=CountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Store a JSON array of app-usage records",
)
def bulk_create_app_usage(payload: Any = Body(...), db: Session = Depends(get_db)):
    count = ingestion_service.ingest_app_usage_batch(db, payload)
    return {"count": count, "message": f"{count} app-usage records stored"}


@router.get("", response_model=ListResponse[AppUsageRead], summary="Latest app-usage records")
def list_app_usage(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    records = query_service.latest_app_usage(db, limit=settings.APP_USAGE_PAGE_LIMIT)
    return {"count": len(records), "data": records}


@router.get("/{device_id}", response_model=ListResponse[AppUsageRead], summary="App usage for a device")
def get_app_usage_for_device(device_id: str, db: Session = Depends(get_db)):
    records = query_service.app_usage_for_device(db, device_id)
    return {"count": len(records), "data": records}
