from typing import Any

import httpx
from jose import jwt

from app.core.config import settings


def create_auth_headers(token: str) -> dict[str, str]:
    """Create Authorization headers with Bearer token."""
    return {"Authorization": f"Bearer {token}"}


def decode_jwt_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def assert_success_envelope(response: httpx.Response, status_code: int = 200) -> dict[str, Any]:
    """Assert a success envelope and return its body."""
    assert response.status_code == status_code, response.text
    body: dict[str, Any] = response.json()
    assert body["error"] is False
    return body


def assert_error_envelope(response: httpx.Response, status_code: int) -> dict[str, Any]:
    """Assert an error envelope with the given status and return its body."""
    assert response.status_code == status_code, response.text
    body: dict[str, Any] = response.json()
    assert body["error"] is True
    assert body["message"]
    assert "data" not in body
    return body
