"""HTTP client for the academy API.

Mirrors what the admin panel and the public site need: login/logout, the
"am I still logged in" check, certificate verification and the course,
certificate and dashboard calls. Privileged calls take an ``AdminSession``
explicitly.
"""

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any
from urllib.parse import quote
from uuid import UUID

import httpx

from app.client.session import AdminSession, validate_session

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# Statuses after which the auth check treats the user as logged out
LOGGED_OUT_STATUSES = (401, 404)


class ApiClientError(Exception):
    """Request failed or the API answered with an error envelope."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class ApiConnectionError(ApiClientError):
    """The server could not be reached."""


class SessionExpiredError(ApiClientError):
    """A privileged call was attempted with an expired session."""

    def __init__(self, message: str = "Session expired, please log in again"):
        super().__init__(message, status_code=401, code="SESSION_EXPIRED")


@dataclass
class VerificationResult:
    """Outcome of a public certificate lookup."""

    certificate: dict[str, Any]
    valid: bool
    message: str


class AcademyApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def __aenter__(self) -> "AcademyApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        session: AdminSession | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        headers: dict[str, str] = {}
        if session is not None:
            if validate_session(session) is None:
                raise SessionExpiredError()
            headers.update(session.authorization_header)

        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.ConnectError as e:
            logger.warning("Cannot reach %s: %s", self.base_url, e)
            raise ApiConnectionError(f"Cannot connect to {self.base_url}") from e
        except httpx.RequestError as e:
            logger.error("Request %s %s failed: %s", method, path, e)
            raise ApiClientError(f"Request failed: {e}") from e

        try:
            payload: dict[str, Any] = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            raise ApiClientError(
                payload.get("message") or response.reason_phrase,
                status_code=response.status_code,
                code=payload.get("code"),
            )
        return payload

    # Auth

    async def login(self, email: str, password: str) -> AdminSession:
        payload = await self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )
        return AdminSession.from_token(payload["data"]["token"])

    async def logout(self) -> None:
        """Notify the server.

        The caller discards its session; the token itself stays valid until expiry.
        """
        await self._request("POST", "/api/auth/logout")

    async def check_auth(self, session: AdminSession | None) -> dict[str, Any] | None:
        """Return the current account, or None when the user must log in again.

        401, 404 and an unreachable server all mean "not authenticated"; any
        other failure is raised.
        """
        if validate_session(session) is None:
            return None

        try:
            payload = await self._request("GET", "/api/auth/me", session=session)
        except ApiConnectionError:
            return None
        except ApiClientError as e:
            if e.status_code in LOGGED_OUT_STATUSES:
                return None
            raise

        account: dict[str, Any] = payload["data"]
        return account

    async def create_admin(self, email: str, password: str) -> dict[str, Any]:
        payload = await self._request(
            "POST", "/api/auth/create-admin", json={"email": email, "password": password}
        )
        account: dict[str, Any] = payload["data"]
        return account

    # Certificates

    async def verify_certificate(self, cert_number: str) -> VerificationResult:
        payload = await self._request(
            "GET", f"/api/certificates/verify/{quote(cert_number, safe='')}"
        )
        return VerificationResult(
            certificate=payload["data"],
            valid=bool(payload["valid"]),
            message=payload.get("message", ""),
        )

    async def list_certificates(self, session: AdminSession) -> list[dict[str, Any]]:
        payload = await self._request("GET", "/api/certificates", session=session)
        certificates: list[dict[str, Any]] = payload["data"]
        return certificates

    async def create_certificate(
        self, session: AdminSession, **fields: Any
    ) -> dict[str, Any]:
        payload = await self._request("POST", "/api/certificates", session=session, json=fields)
        certificate: dict[str, Any] = payload["data"]
        return certificate

    async def delete_certificate(self, session: AdminSession, certificate_id: UUID | str) -> None:
        await self._request("DELETE", f"/api/certificates/{certificate_id}", session=session)

    # Courses

    async def list_courses(self) -> list[dict[str, Any]]:
        payload = await self._request("GET", "/api/courses")
        courses: list[dict[str, Any]] = payload["data"]
        return courses

    async def get_course(self, course_id: UUID | str) -> dict[str, Any]:
        payload = await self._request("GET", f"/api/courses/{course_id}")
        course: dict[str, Any] = payload["data"]
        return course

    async def create_course(self, session: AdminSession, **fields: Any) -> dict[str, Any]:
        payload = await self._request("POST", "/api/courses", session=session, json=fields)
        course: dict[str, Any] = payload["data"]
        return course

    async def update_course(
        self, session: AdminSession, course_id: UUID | str, **fields: Any
    ) -> dict[str, Any]:
        payload = await self._request(
            "PUT", f"/api/courses/{course_id}", session=session, json=fields
        )
        course: dict[str, Any] = payload["data"]
        return course

    async def delete_course(self, session: AdminSession, course_id: UUID | str) -> None:
        await self._request("DELETE", f"/api/courses/{course_id}", session=session)

    # Admin

    async def dashboard(self, session: AdminSession) -> dict[str, Any]:
        payload = await self._request(
            "GET", "/api/admin/statistics/dashboard", session=session
        )
        summary: dict[str, Any] = payload["data"]
        return summary

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")
