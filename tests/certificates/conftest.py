"""
Test fixtures for certificates tests.
"""

from datetime import date

import pytest
from sqlalchemy.orm import Session

from app.certificates.models.certificate import CertificateStatus
from tests.utils.factories import create_certificate_factory


@pytest.fixture
def valid_certificate(db_session: Session):
    return create_certificate_factory(
        db_session,
        cert_number="CERT-001-2024",
        student_name="John Doe",
        course_name="Web Development Fundamentals",
        issue_date=date(2024, 1, 15),
    )


@pytest.fixture
def revoked_certificate(db_session: Session):
    return create_certificate_factory(
        db_session,
        cert_number="CERT-REV-001",
        student_name="Jane Roe",
        status=CertificateStatus.REVOKED,
    )


@pytest.fixture
def certificate_payload():
    return {
        "student_name": "Alice Smith",
        "course_name": "Web Development Fundamentals",
        "issue_date": "2024-03-01",
        "cert_number": "CERT-002-2024",
    }
