"""
Database base module - imports all models so they register on ``Base.metadata``.

There is no migration tooling; ``create_tables`` builds the schema directly
and is called on startup when ``AUTO_CREATE_TABLES`` is enabled.
"""

from sqlalchemy.engine import Engine

from app.auth.models.admin_user import AdminUser
from app.certificates.models.certificate import Certificate, CertificateStatus
from app.courses.models.course import Course
from app.db.session import Base

__all__ = [
    "AdminUser",
    "Certificate",
    "CertificateStatus",
    "Course",
    "create_tables",
]


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
