from uuid import UUID

from pydantic import BaseModel

from app.core.schemas import UTCDatetime


class AdminUserResponse(BaseModel):
    """Account view returned by the API; never carries the password hash."""

    id: UUID
    email: str
    created_at: UTCDatetime
    updated_at: UTCDatetime | None = None

    class Config:
        from_attributes = True
