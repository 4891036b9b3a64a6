"""
Tests for the public course catalog and admin course management.
"""

import uuid
from datetime import UTC, datetime
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import Session

from app.courses.models import Course
from tests.utils.factories import create_course_factory
from tests.utils.helpers import assert_error_envelope, assert_success_envelope


class TestPublicCatalog:
    @pytest.mark.asyncio
    async def test_list_courses_is_public_and_counts(
        self, test_client: AsyncClient, test_course, db_session: Session
    ):
        create_course_factory(db_session, title="Second Course")

        response = await test_client.get("/api/courses")

        body = assert_success_envelope(response)
        assert body["count"] == len(body["data"]) == 2
        titles = {course["title"] for course in body["data"]}
        assert titles == {"Web Development Fundamentals", "Second Course"}

    @pytest.mark.asyncio
    async def test_get_course_returns_fees_as_number(self, test_client, test_course):
        response = await test_client.get(f"/api/courses/{test_course.id}")

        body = assert_success_envelope(response)
        assert body["data"]["fees"] == 299.99
        assert body["data"]["duration"] == "3 months"
        assert body["data"]["image_url"] == "https://example.com/web-dev.jpg"

    @pytest.mark.asyncio
    async def test_get_missing_course_returns_404(self, test_client):
        response = await test_client.get(f"/api/courses/{uuid.uuid4()}")

        body = assert_error_envelope(response, 404)
        assert body["message"] == "Course not found"

    @pytest.mark.asyncio
    async def test_get_course_with_malformed_id_returns_400(self, test_client):
        response = await test_client.get("/api/courses/not-a-uuid")

        assert_error_envelope(response, 400)


class TestCreateCourse:
    @pytest.mark.asyncio
    async def test_create_then_fetch_round_trip(
        self, test_client: AsyncClient, admin_headers, course_payload
    ):
        created = await test_client.post(
            "/api/courses", json=course_payload, headers=admin_headers
        )

        created_body = assert_success_envelope(created, 201)
        assert created_body["message"] == "Course created successfully"
        course_id = created_body["data"]["id"]

        fetched = await test_client.get(f"/api/courses/{course_id}")
        data = assert_success_envelope(fetched)["data"]

        for field in ("title", "description", "duration", "image_url"):
            assert data[field] == course_payload[field]
        assert Decimal(str(data["fees"])) == Decimal("1499.50")
        assert data["created_at"] == created_body["data"]["created_at"]

    @pytest.mark.asyncio
    async def test_create_accepts_fees_as_string(self, test_client, admin_headers, course_payload):
        course_payload["fees"] = "99.90"

        response = await test_client.post(
            "/api/courses", json=course_payload, headers=admin_headers
        )

        body = assert_success_envelope(response, 201)
        assert Decimal(str(body["data"]["fees"])) == Decimal("99.90")

    @pytest.mark.asyncio
    async def test_image_url_is_optional(self, test_client, admin_headers, course_payload):
        del course_payload["image_url"]

        response = await test_client.post(
            "/api/courses", json=course_payload, headers=admin_headers
        )

        body = assert_success_envelope(response, 201)
        assert body["data"]["image_url"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "description", "duration", "fees"])
    async def test_required_fields(self, test_client, admin_headers, course_payload, missing):
        del course_payload[missing]

        response = await test_client.post(
            "/api/courses", json=course_payload, headers=admin_headers
        )

        body = assert_error_envelope(response, 400)
        assert missing in body["message"]

    @pytest.mark.asyncio
    async def test_negative_fees_rejected(self, test_client, admin_headers, course_payload):
        course_payload["fees"] = -1

        response = await test_client.post(
            "/api/courses", json=course_payload, headers=admin_headers
        )

        assert_error_envelope(response, 400)

    @pytest.mark.asyncio
    async def test_create_requires_token(self, test_client, course_payload, db_session):
        response = await test_client.post("/api/courses", json=course_payload)

        assert_error_envelope(response, 401)
        assert db_session.query(Course).count() == 0


class TestUpdateCourse:
    @pytest.mark.asyncio
    async def test_partial_update_changes_only_given_fields(
        self, test_client, admin_headers, test_course
    ):
        response = await test_client.put(
            f"/api/courses/{test_course.id}",
            json={"title": "Updated Web Development Course"},
            headers=admin_headers,
        )

        body = assert_success_envelope(response)
        assert body["message"] == "Course updated successfully"
        assert body["data"]["title"] == "Updated Web Development Course"
        assert body["data"]["duration"] == "3 months"
        assert Decimal(str(body["data"]["fees"])) == Decimal("299.99")

    @pytest.mark.asyncio
    async def test_update_can_clear_image_url(self, test_client, admin_headers, test_course):
        response = await test_client.put(
            f"/api/courses/{test_course.id}", json={"image_url": None}, headers=admin_headers
        )

        body = assert_success_envelope(response)
        assert body["data"]["image_url"] is None

    @pytest.mark.asyncio
    async def test_update_cannot_clear_required_field(
        self, test_client, admin_headers, test_course
    ):
        response = await test_client.put(
            f"/api/courses/{test_course.id}", json={"fees": None}, headers=admin_headers
        )

        body = assert_error_envelope(response, 400)
        assert "fees" in body["message"]

    @pytest.mark.asyncio
    async def test_empty_update_refreshes_updated_at(
        self, test_client, admin_headers, test_course, db_session: Session
    ):
        test_course.updated_at = datetime(2020, 1, 1, tzinfo=UTC)
        db_session.commit()

        response = await test_client.put(
            f"/api/courses/{test_course.id}", json={}, headers=admin_headers
        )

        body = assert_success_envelope(response)
        assert not body["data"]["updated_at"].startswith("2020")
        assert body["data"]["title"] == "Web Development Fundamentals"

    @pytest.mark.asyncio
    async def test_update_missing_course_returns_404(self, test_client, admin_headers):
        response = await test_client.put(
            f"/api/courses/{uuid.uuid4()}", json={"title": "x"}, headers=admin_headers
        )

        assert_error_envelope(response, 404)

    @pytest.mark.asyncio
    async def test_update_requires_token(self, test_client, test_course):
        response = await test_client.put(f"/api/courses/{test_course.id}", json={"title": "x"})

        assert_error_envelope(response, 401)


class TestDeleteCourse:
    @pytest.mark.asyncio
    async def test_delete_course(
        self, test_client, admin_headers, test_course, db_session: Session
    ):
        course_id = test_course.id

        response = await test_client.delete(f"/api/courses/{course_id}", headers=admin_headers)

        body = assert_success_envelope(response)
        assert body["message"] == "Course deleted successfully"
        assert db_session.query(Course).filter(Course.id == course_id).first() is None

    @pytest.mark.asyncio
    async def test_delete_missing_course_returns_404_without_mutation(
        self, test_client, admin_headers, test_course, db_session: Session
    ):
        before = db_session.query(Course).count()

        response = await test_client.delete(f"/api/courses/{uuid.uuid4()}", headers=admin_headers)

        body = assert_error_envelope(response, 404)
        assert body["message"] == "Course not found"
        assert db_session.query(Course).count() == before

    @pytest.mark.asyncio
    async def test_delete_requires_token(self, test_client, test_course, db_session: Session):
        response = await test_client.delete(f"/api/courses/{test_course.id}")

        assert_error_envelope(response, 401)
        assert db_session.query(Course).count() == 1
