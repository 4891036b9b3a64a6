from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.security import get_token_signer  # noqa: E402
from app.db.base import create_tables  # noqa: E402
from app.db.session import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from tests.utils.factories import create_admin_factory  # noqa: E402
from tests.utils.helpers import create_auth_headers  # noqa: E402


@pytest.fixture(scope="session")
def test_engine():
    # One in-memory database shared by every connection of the suite
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    create_tables(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="session")
def test_session_local(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(test_session_local):
    session = test_session_local()

    session.commit = session.flush

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
async def test_app(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client


@pytest.fixture
def token_signer():
    return get_token_signer()


@pytest.fixture
def test_admin(db_session):
    return create_admin_factory(db_session, email="admin@example.com", password="adminpass123")


@pytest.fixture
def test_admin_token(test_admin, token_signer):
    return token_signer.create_access_token(
        {"sub": str(test_admin.id), "email": test_admin.email, "role": "admin"}
    )


@pytest.fixture
def admin_headers(test_admin_token):
    return create_auth_headers(test_admin_token)
