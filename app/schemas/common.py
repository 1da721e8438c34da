# schemas/common.py
import re
from datetime import datetime, timezone
from typing import Annotated, Any, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")

_NUMERIC = re.compile(r"-?\d+(\.\d+)?")


# =====================================================================
# TIMESTAMPS
# =====================================================================

def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: Any) -> datetime:
    """
    Coerce a client timestamp into a datetime.

    - numbers are epoch milliseconds (JavaScript / Android convention)
    - strings are ISO 8601, extended or basic ("20240101"), with an optional
      trailing "Z"; numeric strings that are not ISO 8601 are epoch
      milliseconds
    - datetimes pass through

    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise ValueError("timestamp must be a number or an ISO 8601 string")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"timestamp {value} is out of range")
    if isinstance(value, str):
        text = value.strip()
        iso_text = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
        try:
            return datetime.fromisoformat(iso_text)
        except ValueError:
            if _NUMERIC.fullmatch(text):
                return parse_timestamp(float(text))
            raise ValueError(f"invalid timestamp '{value}'")
    raise ValueError("timestamp must be a number or an ISO 8601 string")


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp), AfterValidator(ensure_utc)]


# =====================================================================
# BASE MODELS
# =====================================================================

class TelemetryModel(BaseModel):
    """camelCase on the wire, snake_case in Python and the database."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class TelemetryRead(TelemetryModel):
    """Fields every stored record carries."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: Optional[Timestamp] = None


# =====================================================================
# RESPONSE WRAPPERS
# =====================================================================

class ItemResponse(BaseModel, Generic[T]):
    """Envelope around a single record."""
    success: bool = True
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Envelope around a result set."""
    success: bool = True
    count: int
    data: List[T]


class CountResponse(BaseModel):
    """Envelope for bulk inserts and deletes."""
    success: bool = True
    count: int
    message: str
