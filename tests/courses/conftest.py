"""
Test fixtures for courses tests.
"""

import pytest
from sqlalchemy.orm import Session

from tests.utils.factories import create_course_factory


@pytest.fixture
def test_course(db_session: Session):
    """Create a test course."""
    return create_course_factory(
        db_session,
        title="Web Development Fundamentals",
        fees="299.99",
        duration="3 months",
        image_url="https://example.com/web-dev.jpg",
    )


@pytest.fixture
def course_payload():
    return {
        "title": "Data Science Bootcamp",
        "description": "Python, statistics and machine learning from scratch",
        "duration": "6 months",
        "fees": 1499.50,
        "image_url": "https://example.com/ds.jpg",
    }
