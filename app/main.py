from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.admin.routes import admin_statistics
from app.auth.routes import auth
from app.certificates.routes import certificates
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.courses.routes import courses
from app.db.base import create_tables
from app.db.session import engine, get_db

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if settings.AUTO_CREATE_TABLES:
        logger.info("creating_tables")
        try:
            create_tables(engine)
        except SQLAlchemyError as e:
            logger.error("table_creation_failed", error=str(e))
            raise

    logger.info("startup_complete", project=settings.PROJECT_NAME, version=settings.VERSION)

    yield

    engine.dispose()
    logger.info("engine_disposed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Backend API for the academy website: courses, certificates and admin panel",
    version=settings.VERSION,
)

register_exception_handlers(app, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["authentication"])
app.include_router(courses.router, prefix=f"{settings.API_PREFIX}/courses", tags=["courses"])
app.include_router(
    certificates.router, prefix=f"{settings.API_PREFIX}/certificates", tags=["certificates"]
)
app.include_router(
    admin_statistics.router, prefix=f"{settings.API_PREFIX}/admin", tags=["admin-statistics"]
)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": settings.PROJECT_NAME, "version": settings.VERSION, "status": "running"}


@app.get("/health")
async def health_check(db: Session = Depends(get_db)) -> dict[str, str]:
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except SQLAlchemyError:
        logger.warning("health_check_database_unreachable")
        db_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "timestamp": datetime.now(UTC).isoformat(),
    }
