"""Core schema definitions for standardized API responses.

Every endpoint answers with the same envelope:

    {"error": false, "message": "Course created successfully", "data": {...}}

List endpoints add ``count``; certificate verification adds ``valid``.
Error responses are produced by the handlers in ``app.core.exceptions``:

    {"error": true, "message": "Course not found", "code": "NOT_FOUND"}
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel
from pydantic.functional_serializers import PlainSerializer

T = TypeVar("T")


def _serialize_utc_datetime(v: datetime | None) -> str | None:
    if v is None:
        return None
    # SQLite drops tzinfo; stored values are always UTC
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    return v.isoformat()


UTCDatetime = Annotated[datetime, PlainSerializer(_serialize_utc_datetime)]

# Fees stay Decimal in Python and render as JSON numbers
MoneyDecimal = Annotated[
    Decimal, PlainSerializer(lambda v: float(v), return_type=float, when_used="json")
]


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response envelope."""

    error: bool = False
    message: str | None = None
    data: T | None = None


class ListResponse(BaseModel, Generic[T]):
    """Envelope for collection endpoints."""

    error: bool = False
    message: str | None = None
    data: list[T]
    count: int


class MessageResponse(BaseModel):
    """Envelope without payload (logout, delete)."""

    error: bool = False
    message: str


def success_response(data: T, message: str | None = None) -> ApiResponse[T]:
    """Create a successful API response."""
    return ApiResponse(error=False, data=data, message=message)


def list_response(data: list[T], message: str | None = None) -> ListResponse[T]:
    """Create a collection response; ``count`` is the number of items returned."""
    return ListResponse(error=False, data=data, count=len(data), message=message)
