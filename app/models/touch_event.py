# models/touch_event.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, DateTime, Uuid
from app.core.database import Base


class TouchEvent(Base):
    __tablename__ = "touchevents"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    device_id = Column(String(255), nullable=True, index=True)

    # Clients send epoch milliseconds; normalized to an instant on ingestion
    timestamp = Column(DateTime(timezone=True), nullable=False, index=True)

    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    type = Column(String(20), nullable=False, index=True)   # tap | swipe | longpress
    direction = Column(String(10), nullable=True)           # up | down | left | right
    end_x = Column(Float, nullable=True)
    end_y = Column(Float, nullable=True)
    duration_ms = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
