# models/eye_tracking.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Boolean, DateTime, JSON, Uuid
from app.core.database import Base


class EyeTrackingSample(Base):
    __tablename__ = "eyetrackings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    device_id = Column(String(255), nullable=True, index=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    is_user_looking = Column(Boolean, nullable=False, default=True)
    # Stored verbatim: english and german tokens coexist
    direction = Column(String(10), nullable=True, index=True)
    eye_position = Column(JSON, nullable=True)    # {"leftX": 0.4, "rightX": 0.6, ...}

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
