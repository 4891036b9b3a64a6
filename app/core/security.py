import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

ACCESS_TOKEN_TYPE = "access"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bool(pwd_context.verify(plain_password, hashed_password))


def get_password_hash(password: str) -> str:
    return str(pwd_context.hash(password))


def dummy_verify() -> None:
    """Spend the same time as a real verification when the account is unknown."""
    pwd_context.dummy_verify()


class TokenSigner:
    """Issues and checks HMAC-signed access tokens.

    Tokens are stateless: nothing is stored server side, a token is valid
    until its ``exp`` claim.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_hours: int = 24):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_delta = timedelta(hours=expire_hours)

    def create_access_token(
        self, data: dict[str, Any], issued_at: datetime | None = None
    ) -> str:
        issued_at = issued_at or datetime.now(UTC)
        to_encode = data.copy()
        to_encode.update(
            {
                "iat": issued_at,
                "exp": issued_at + self.expire_delta,
                "type": ACCESS_TOKEN_TYPE,
            }
        )
        encoded_jwt: str = jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)
        return encoded_jwt

    def decode_token(self, token: str) -> dict[str, Any] | None:
        try:
            payload: dict[str, Any] = jwt.decode(
                token, self.secret_key, algorithms=[self.algorithm]
            )
        except JWTError as e:
            logger.debug("Token rejected: %s", e)
            return None
        if payload.get("type") != ACCESS_TOKEN_TYPE:
            return None
        return payload


@lru_cache
def get_token_signer() -> TokenSigner:
    """Signing-key provider, overridable as a FastAPI dependency."""
    return TokenSigner(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expire_hours=settings.ACCESS_TOKEN_EXPIRE_HOURS,
    )
