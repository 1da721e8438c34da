"""Tests for payload normalization and the record store."""

from datetime import datetime, timezone

import pytest
from pydantic import BaseModel

from app.core.database import Database
from app.core.exceptions import DatabaseIntegrityError, MalformedPayloadError, ValidationError
from app.crud.records import crud_touch_event
from app.schemas.common import parse_timestamp
from app.schemas.touch import TouchEventCreate
from app.services.ingestion import normalize_eye_tracking_timestamp, require_array, validate_batch


class TouchWithoutX(BaseModel):
    """Skips schema validation so the NOT NULL constraint on x fires."""
    timestamp: datetime
    y: float
    type: str


@pytest.fixture
def db():
    database = Database("sqlite://")
    database.connect()
    session = database.session()
    yield session
    session.close()
    database.close()


class TestParseTimestamp:

    def test_epoch_milliseconds(self):
        assert parse_timestamp(1700000000000) == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_numeric_string(self):
        assert parse_timestamp("1700000000000") == parse_timestamp(1700000000000)

    def test_iso_with_zulu(self):
        assert parse_timestamp("2024-01-01T00:00:00Z") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_iso_basic_date_is_not_epoch(self):
        assert parse_timestamp("20240101") == datetime(2024, 1, 1)

    def test_iso_basic_datetime(self):
        assert parse_timestamp("20240101T120000Z") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_timestamp("soon")

    def test_rejects_booleans(self):
        with pytest.raises(ValueError):
            parse_timestamp(True)


class TestPayloadShape:

    def test_bare_array(self):
        assert require_array([1, 2]) == [1, 2]

    def test_named_array(self):
        assert require_array({"touchData": []}, "touchData") == []

    @pytest.mark.parametrize("payload", [None, {}, {"touchData": "x"}, {"touchData": {}}, []])
    def test_malformed_named_array(self, payload):
        with pytest.raises(MalformedPayloadError):
            require_array(payload, "touchData")

    def test_validate_batch_names_the_failing_element(self):
        items = [{"timestamp": 1, "x": 0, "y": 0, "type": "tap"}, "oops"]

        with pytest.raises(ValidationError, match=r"touchData\[1\]"):
            validate_batch(TouchEventCreate, items, "touchData")


class TestEyeTrackingNormalization:

    def test_parses_text(self):
        sample = normalize_eye_tracking_timestamp({"timestamp": "2024-01-01T00:00:00Z"})

        assert sample["timestamp"] == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_drops_unparseable_text(self):
        sample = normalize_eye_tracking_timestamp({"timestamp": "garbage", "direction": "mitte"})

        assert sample == {"direction": "mitte"}

    def test_leaves_numbers_alone(self):
        assert normalize_eye_tracking_timestamp({"timestamp": 5}) == {"timestamp": 5}


class TestRecordStore:

    def test_create_many_rolls_back_whole_batch(self, db):
        valid = TouchEventCreate(timestamp=1, x=0, y=0, type="tap")
        broken = TouchWithoutX(timestamp=parse_timestamp(2), y=0, type="tap")

        with pytest.raises(DatabaseIntegrityError):
            crud_touch_event.create_many(db, objs_in=[valid, broken])

        assert crud_touch_event.get_multi(db) == []

    def test_delete_all_returns_count(self, db):
        events = [TouchEventCreate(timestamp=i, x=i, y=i, type="tap") for i in range(4)]
        crud_touch_event.create_many(db, objs_in=events)

        assert crud_touch_event.delete_all(db) == 4
        assert crud_touch_event.get_multi(db) == []
