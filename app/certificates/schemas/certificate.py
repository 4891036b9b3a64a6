from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from app.certificates.models.certificate import CertificateStatus
from app.core.schemas import UTCDatetime


class CertificateCreate(BaseModel):
    student_name: str = Field(..., min_length=1, max_length=255)
    course_name: str = Field(..., min_length=1, max_length=255)
    issue_date: date
    cert_number: str = Field(..., min_length=1, max_length=100)
    status: CertificateStatus = CertificateStatus.VALID

    class Config:
        # Stored and looked-up numbers are both stripped
        str_strip_whitespace = True


class CertificateResponse(BaseModel):
    id: UUID
    student_name: str
    course_name: str
    issue_date: date
    cert_number: str
    status: CertificateStatus
    created_at: UTCDatetime

    class Config:
        from_attributes = True


class CertificateVerifyResponse(BaseModel):
    """Verification envelope: the record on file plus whether it is currently valid."""

    error: bool = False
    message: str
    data: CertificateResponse
    valid: bool
