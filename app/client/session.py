"""Client-side admin session.

An ``AdminSession`` is the explicit replacement for an ambient "logged in"
flag: it is built from the token returned by ``/api/auth/login`` and passed
to every privileged call. The client has no signing key, so the claims are
read without signature verification; the server re-checks every request.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from jose import JWTError, jwt

from app.auth.schemas.auth import Principal


class InvalidSessionTokenError(ValueError):
    """The token cannot be read as an access token."""


@dataclass(frozen=True)
class AdminSession:
    token: str
    principal: Principal
    expires_at: datetime

    @classmethod
    def from_token(cls, token: str) -> "AdminSession":
        try:
            claims = jwt.get_unverified_claims(token)
        except JWTError as e:
            raise InvalidSessionTokenError("Malformed access token") from e

        try:
            principal = Principal(
                id=str(claims["sub"]),
                email=claims.get("email", ""),
                role=claims.get("role", ""),
            )
            expires_at = datetime.fromtimestamp(int(claims["exp"]), tz=UTC)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSessionTokenError("Access token is missing required claims") from e

        return cls(token=token, principal=principal, expires_at=expires_at)

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) >= self.expires_at

    @property
    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


def validate_session(
    session: AdminSession | None, now: datetime | None = None
) -> AdminSession | None:
    """Return the session if it can still be used, otherwise None."""
    if session is None or session.is_expired(now):
        return None
    return session
