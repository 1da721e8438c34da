# crud/records.py
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import asc, desc
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import Base
from app.core.exceptions import DatabaseError, DatabaseIntegrityError, StoreUnavailableError
from app.models import AppUsageEvent, Device, EyeTrackingSample, SensorReading, TouchEvent

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class CRUDRecord(Generic[ModelType]):
    """
    Record store for one telemetry kind.

    Records are insert-only: there is no update, and deletion is
    all-or-nothing per table.
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    # =====================================================================
    # HELPER METHODS
    # =====================================================================

    @contextmanager
    def _guard(self, db: Session) -> Iterator[None]:
        """Roll back and translate driver errors into store errors."""
        try:
            yield
        except (OperationalError, InterfaceError) as e:
            db.rollback()
            logger.error(f"{self.model.__tablename__}: database unreachable: {e}")
            raise StoreUnavailableError(str(e)) from e
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"{self.model.__tablename__}: constraint violated: {e.orig}")
            raise DatabaseIntegrityError(f"Constraint violated on {self.model.__tablename__}") from e
        except SQLAlchemyError as e:
            db.rollback()
            raise DatabaseError(str(e)) from e

    def _to_model(self, obj_in: BaseModel) -> ModelType:
        # omitted values fall through to column defaults (timestamp = now)
        return self.model(**obj_in.model_dump(exclude_none=True))

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, obj_in: BaseModel) -> ModelType:
        """
        Insert one record.

        Args:
            db: Database session
            obj_in: Validated create schema

        Returns:
            Stored instance with generated id and defaults applied
        """
        db_obj = self._to_model(obj_in)
        with self._guard(db):
            db.add(db_obj)
            db.commit()
            db.refresh(db_obj)
        return db_obj

    def create_many(self, db: Session, *, objs_in: Sequence[BaseModel]) -> int:
        """
        Insert a batch in a single transaction.

        Either every record is stored or none is.

        Returns:
            Number of records inserted
        """
        db_objs = [self._to_model(obj_in) for obj_in in objs_in]
        if not db_objs:
            return 0
        with self._guard(db):
            db.add_all(db_objs)
            db.commit()
        return len(db_objs)

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_multi(
        self,
        db: Session,
        *,
        filters: Sequence = (),
        newest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[ModelType]:
        """
        Find records matching every filter expression.

        Args:
            db: Database session
            filters: SQLAlchemy boolean expressions on the model's columns
            newest_first: Sort by timestamp descending instead of insertion
            limit: Maximum number of records to return

        Returns:
            List of instances, ordered deterministically
        """
        query = db.query(self.model).filter(*filters)
        if newest_first:
            query = query.order_by(desc(self.model.timestamp), desc(self.model.id))
        else:
            query = query.order_by(asc(self.model.created_at), asc(self.model.id))
        if limit is not None:
            query = query.limit(limit)
        with self._guard(db):
            return query.all()

    def get_latest(self, db: Session, *, filters: Sequence = ()) -> Optional[ModelType]:
        """Newest record (by timestamp) matching the filters, or None."""
        records = self.get_multi(db, filters=filters, newest_first=True, limit=1)
        return records[0] if records else None

    # =====================================================================
    # DELETE OPERATIONS
    # =====================================================================

    def delete_all(self, db: Session) -> int:
        """
        Delete every record of this kind.

        Returns:
            Number of records deleted
        """
        with self._guard(db):
            deleted = db.query(self.model).delete(synchronize_session=False)
            db.commit()
        return deleted


# Create singleton instances
crud_device = CRUDRecord(Device)
crud_sensor_reading = CRUDRecord(SensorReading)
crud_touch_event = CRUDRecord(TouchEvent)
crud_eye_tracking = CRUDRecord(EyeTrackingSample)
crud_app_usage = CRUDRecord(AppUsageEvent)
