import enum
import uuid
from datetime import UTC, date, datetime

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class CertificateStatus(str, enum.Enum):
    VALID = "Valid"
    EXPIRED = "Expired"
    REVOKED = "Revoked"


class Certificate(Base):
    __tablename__ = "certificates"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    student_name: Mapped[str] = mapped_column(String(255))
    course_name: Mapped[str] = mapped_column(String(255), index=True)
    issue_date: Mapped[date] = mapped_column(index=True)
    cert_number: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    status: Mapped[CertificateStatus] = mapped_column(
        Enum(
            CertificateStatus,
            name="certificate_status",
            native_enum=False,
            values_callable=lambda obj: [e.value for e in obj],
        ),
        default=CertificateStatus.VALID,
    )
    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))

    @property
    def is_valid(self) -> bool:
        return self.status == CertificateStatus.VALID

    def __repr__(self) -> str:
        return f"<Certificate(id={self.id}, cert_number={self.cert_number}, status={self.status})>"  # noqa: E501
