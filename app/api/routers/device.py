# app/api/routers/device.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.services.ingestion import ingestion_service
from app.services.query import query_service
from app.schemas.common import ItemResponse, ListResponse
from app.schemas.device import DeviceCreate, DeviceRead

router = APIRouter(prefix="/api/device", tags=["Device"])


@router.post(
    "",
    response_model=ItemResponse[DeviceRead],
    status_code=status.HTTP_201_CREATED,
    summary="Store a device metadata observation",
)
def create_device(device_data: DeviceCreate, db: Session = Depends(get_db)):
    """
    Store one device observation.

    Every post creates a new row; a device id may appear many times.
    """
    device = ingestion_service.create_device(db, device_data)
    return {"data": device}


@router.get("", response_model=ListResponse[DeviceRead], summary="List device observations")
def list_devices(db: Session = Depends(get_db)):
    devices = query_service.list_devices(db)
    return {"count": len(devices), "data": devices}


@router.get(
    "/{device_id}",
    response_model=ItemResponse[DeviceRead],
    summary="Get the latest observation for a device",
)
def get_device(device_id: str, db: Session = Depends(get_db)):
    """Returns 404 when no record carries this device id."""
    device = query_service.get_device(db, device_id)
    return {"data": device}
