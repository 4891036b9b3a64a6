"""
Setup script for the initial admin user.

Creates the first administrator account from ADMIN_EMAIL / ADMIN_PASSWORD.
Does nothing when any admin account already exists.

Usage:
    python app/scripts/setup_admin.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from sqlalchemy.orm import Session

from app.auth.models.admin_user import AdminUser
from app.auth.schemas.auth import CreateAdminRequest
from app.auth.services.auth_service import AuthService
from app.core.config import settings
from app.core.security import get_token_signer
from app.db.base import create_tables
from app.db.session import engine, get_db


def setup_admin_user(db: Session, email: str, password: str) -> AdminUser | None:
    """Create the initial admin; returns None when an admin already exists.

    The credentials go through the same validation as POST /api/auth/create-admin
    and raise pydantic.ValidationError when rejected.
    """
    if db.query(AdminUser.id).first() is not None:
        print("✅ Admin user already exists. Skipping.")
        return None

    request = CreateAdminRequest(email=email, password=password)

    print(f"📧 Creating admin user with email: {request.email.lower()}")
    admin = AuthService(db, get_token_signer()).create_administrator(
        request.email, request.password
    )
    print(f"✅ Admin user created: {admin.email} (id: {admin.id})")
    print("⚠️  IMPORTANT: Change the default password after first login!")
    return admin


def main() -> None:
    """Main entry point."""
    print("=" * 60)
    print("🚀 Initial Admin Setup")
    print("=" * 60)
    print()

    create_tables(engine)

    db = next(get_db())
    try:
        setup_admin_user(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    except Exception as e:
        print(f"\n❌ Error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
