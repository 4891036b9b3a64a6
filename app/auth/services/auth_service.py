"""Administrator authentication: login, account lookup and bootstrap."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.auth.models.admin_user import AdminUser
from app.auth.schemas.auth import Principal
from app.core import security
from app.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.core.repository import BaseRepository
from app.core.security import TokenSigner

logger = logging.getLogger(__name__)

ADMIN_ROLE = "admin"


class AdminUserRepository(BaseRepository[AdminUser]):
    def __init__(self, db: Session):
        super().__init__(db, AdminUser)

    def find_by_email(self, email: str) -> AdminUser | None:
        return self.find_one_by(email=email.lower())


class AuthService:
    def __init__(self, db: Session, signer: TokenSigner):
        self.repository = AdminUserRepository(db)
        self.signer = signer

    def authenticate(self, email: str, password: str) -> tuple[AdminUser, str]:
        """Check credentials and issue a 24h access token.

        Unknown email and wrong password fail identically, so the response
        does not reveal which accounts exist.
        """
        admin = self.repository.find_by_email(email)

        if admin is None:
            security.dummy_verify()
            logger.warning("Login failed: invalid credentials")
            raise UnauthorizedError("Invalid credentials", error_code="INVALID_CREDENTIALS")

        if not security.verify_password(password, admin.password_hash):
            logger.warning("Login failed: invalid credentials")
            raise UnauthorizedError("Invalid credentials", error_code="INVALID_CREDENTIALS")

        token = self.signer.create_access_token(
            {"sub": str(admin.id), "email": admin.email, "role": ADMIN_ROLE}
        )
        logger.info("Admin %s logged in", admin.id)
        return admin, token

    def get_current_admin(self, principal: Principal) -> AdminUser:
        """Re-fetch the account behind a token instead of trusting its claims."""
        try:
            admin_id = UUID(principal.id)
        except ValueError as e:
            raise NotFoundError("User not found", resource="admin_user") from e

        admin = self.repository.get_by_id(admin_id)
        if admin is None:
            raise NotFoundError("User not found", resource="admin_user")
        return admin

    def create_administrator(self, email: str, password: str) -> AdminUser:
        """Create an admin account; an existing email is left untouched."""
        normalized = email.lower()
        if self.repository.find_by_email(normalized) is not None:
            raise ConflictError("Admin user already exists", resource="admin_user")

        try:
            admin = self.repository.create(
                email=normalized,
                password_hash=security.get_password_hash(password),
            )
        except IntegrityError as e:
            self.repository.db.rollback()
            raise ConflictError("Admin user already exists", resource="admin_user") from e

        logger.info("Created admin user %s", admin.id)
        return admin
