"""Python client for the academy API."""

from app.client.api_client import (
    AcademyApiClient,
    ApiClientError,
    ApiConnectionError,
    SessionExpiredError,
    VerificationResult,
)
from app.client.session import AdminSession, InvalidSessionTokenError, validate_session

__all__ = [
    "AcademyApiClient",
    "AdminSession",
    "ApiClientError",
    "ApiConnectionError",
    "InvalidSessionTokenError",
    "SessionExpiredError",
    "VerificationResult",
    "validate_session",
]
