from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from app.core.schemas import MoneyDecimal, UTCDatetime


class CourseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    duration: str = Field(..., min_length=1, max_length=100)
    fees: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(None, max_length=1024)


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    """Partial update: only fields present in the request body are changed."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    duration: str | None = Field(None, min_length=1, max_length=100)
    fees: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(None, max_length=1024)


class CourseResponse(BaseModel):
    id: UUID
    title: str
    description: str
    duration: str
    fees: MoneyDecimal
    image_url: str | None = None
    created_at: UTCDatetime
    updated_at: UTCDatetime

    class Config:
        from_attributes = True
