import uuid
from datetime import UTC, date, datetime
from decimal import Decimal

from faker import Faker
from sqlalchemy.orm import Session

from app.auth.models.admin_user import AdminUser
from app.certificates.models.certificate import Certificate, CertificateStatus
from app.core.security import get_password_hash
from app.courses.models.course import Course

fake = Faker()


def create_admin_factory(
    db_session: Session,
    email: str | None = None,
    password: str = "adminpass123",
) -> AdminUser:
    """
    Factory function to create admin accounts.

    Args:
        db_session: Database session
        email: Admin email (generates random if None); stored lower-cased
        password: Plain text password

    Returns:
        Created AdminUser instance
    """
    admin = AdminUser(
        id=uuid.uuid4(),
        email=(email or fake.email()).lower(),
        password_hash=get_password_hash(password),
        created_at=datetime.now(UTC),
        updated_at=datetime.now(UTC),
    )

    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)

    return admin


def create_course_factory(
    db_session: Session,
    title: str | None = None,
    fees: Decimal | str = "199.00",
    duration: str = "3 months",
    image_url: str | None = None,
) -> Course:
    course = Course(
        title=title or fake.catch_phrase(),
        description=fake.paragraph(),
        duration=duration,
        fees=Decimal(fees),
        image_url=image_url,
    )

    db_session.add(course)
    db_session.commit()
    db_session.refresh(course)

    return course


def create_certificate_factory(
    db_session: Session,
    cert_number: str | None = None,
    student_name: str | None = None,
    course_name: str = "Web Development Fundamentals",
    issue_date: date | None = None,
    status: CertificateStatus = CertificateStatus.VALID,
) -> Certificate:
    certificate = Certificate(
        student_name=student_name or fake.name(),
        course_name=course_name,
        issue_date=issue_date or date(2024, 1, 15),
        cert_number=cert_number or f"CERT-{fake.unique.random_number(digits=6)}",
        status=status,
    )

    db_session.add(certificate)
    db_session.commit()
    db_session.refresh(certificate)

    return certificate
