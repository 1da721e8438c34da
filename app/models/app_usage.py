# models/app_usage.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Integer, DateTime, Uuid
from app.core.database import Base


class AppUsageEvent(Base):
    __tablename__ = "appusages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    device_id = Column(String(255), nullable=False, index=True)

    package_name = Column(String(255), nullable=True)
    app_name = Column(String(255), nullable=True)
    usage_duration = Column(Float, nullable=True)
    open_count = Column(Integer, nullable=True)

    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
