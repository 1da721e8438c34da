# models/sensor_reading.py

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Boolean, DateTime, JSON, Uuid
from app.core.database import Base


class SensorReading(Base):
    __tablename__ = "sensordatas"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    device_id = Column(String(255), nullable=False, index=True)
    timestamp = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)

    gyroscope = Column(JSON, nullable=True)       # {"x": float, "y": float, "z": float}
    magnetometer = Column(JSON, nullable=True)    # {"x": float, "y": float, "z": float}
    light_sensor = Column(Float, nullable=True)
    proximity_sensor = Column(Boolean, nullable=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
