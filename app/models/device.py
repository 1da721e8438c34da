# models/device.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Boolean, DateTime, Uuid
from app.core.database import Base


class Device(Base):
    """Device metadata observation. Repeated posts create new rows."""

    __tablename__ = "devices"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    device_id = Column(String(255), nullable=False, index=True)

    model = Column(String(255), nullable=True)
    manufacturer = Column(String(255), nullable=True)
    os_version = Column(String(100), nullable=True)
    screen_brightness = Column(Float, nullable=True)
    screen_orientation = Column(String(50), nullable=True)
    one_hand_mode = Column(Boolean, nullable=True)
    dominant_hand = Column(String(50), nullable=True)

    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
