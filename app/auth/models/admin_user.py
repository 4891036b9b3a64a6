import uuid
from datetime import UTC, datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AdminUser(Base):
    """
    Administrator account for the admin panel.

    Attributes:
        id: Unique UUID primary key
        email: Unique email address, always stored lower-cased
        password_hash: bcrypt hash of the password
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "admin_users"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=_utcnow, onupdate=_utcnow)

    def __repr__(self) -> str:
        return f"<AdminUser(id={self.id}, email={self.email})>"
