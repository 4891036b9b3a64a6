"""
Seed script for demo data.

Creates a sample course and the sample certificate CERT-001-2024 so the
public pages and the verification lookup have something to show.
Can be run multiple times - skips records that already exist.

Usage:
    python app/scripts/seed_demo_data.py
"""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sqlalchemy.orm import Session

from app.certificates.models.certificate import Certificate, CertificateStatus
from app.courses.models.course import Course
from app.db.base import create_tables
from app.db.session import engine, get_db

DEMO_COURSE_TITLE = "Web Development Fundamentals"
DEMO_CERT_NUMBER = "CERT-001-2024"


def seed_demo_data(db: Session) -> None:
    """Seed demo course and certificate into the database."""
    course = db.query(Course).filter(Course.title == DEMO_COURSE_TITLE).first()
    if course:
        print("⏭️  Demo course already exists. Skipping.")
    else:
        course = Course(
            title=DEMO_COURSE_TITLE,
            description="Learn the basics of web development including HTML, CSS, and JavaScript",
            duration="3 months",
            fees=Decimal("299.99"),
            image_url="https://example.com/web-dev.jpg",
        )
        db.add(course)
        db.flush()
        print(f"✅ Created course: {course.title}")

    certificate = db.query(Certificate).filter(Certificate.cert_number == DEMO_CERT_NUMBER).first()
    if certificate:
        print("⏭️  Demo certificate already exists. Skipping.")
    else:
        certificate = Certificate(
            student_name="John Doe",
            course_name=DEMO_COURSE_TITLE,
            issue_date=date(2024, 1, 15),
            cert_number=DEMO_CERT_NUMBER,
            status=CertificateStatus.VALID,
        )
        db.add(certificate)
        print(f"✅ Created certificate: {certificate.cert_number}")

    db.commit()


def main() -> None:
    """Main entry point."""
    print("=" * 60)
    print("🌱 Demo Data Seeding Script")
    print("=" * 60)
    print()

    create_tables(engine)

    db = next(get_db())
    try:
        seed_demo_data(db)
    except Exception as e:
        print(f"\n❌ Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
