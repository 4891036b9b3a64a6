import logging
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.auth.schemas.auth import Principal
from app.auth.services.auth_service import ADMIN_ROLE, AuthService
from app.core.exceptions import UnauthorizedError
from app.core.security import TokenSigner, get_token_signer
from app.db.session import get_db

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def get_bearer_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Extract the token from ``Authorization: Bearer <token>``"""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise UnauthorizedError("Access denied. No token provided.", error_code="MISSING_TOKEN")

    token = authorization[len(BEARER_PREFIX) :].strip()
    if not token:
        raise UnauthorizedError("Access denied. No token provided.", error_code="MISSING_TOKEN")
    return token


async def get_current_principal(
    request: Request,
    token: str = Depends(get_bearer_token),
    signer: TokenSigner = Depends(get_token_signer),
) -> Principal:
    """Validate the bearer token and attach the decoded principal to the request."""
    payload = signer.decode_token(token)

    if payload is None or not payload.get("sub") or payload.get("role") != ADMIN_ROLE:
        logger.warning("Rejected bearer token on %s", request.url.path)
        raise UnauthorizedError("Invalid token.", error_code="INVALID_TOKEN")

    principal = Principal(
        id=str(payload["sub"]),
        email=payload.get("email", ""),
        role=payload["role"],
    )
    request.state.principal = principal
    return principal


def get_auth_service(
    db: Session = Depends(get_db),
    signer: TokenSigner = Depends(get_token_signer),
) -> AuthService:
    return AuthService(db, signer)
