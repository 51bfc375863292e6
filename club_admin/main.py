# /club_admin/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

# --- Application-specific Imports ---
from .core.config import Settings, load_settings
from .core.deps import get_current_user_id, require_admin
from .routers import (
    attendance_router,
    auth_router,
    classes_router,
    courses_router,
    dashboard_router,
    enrollments_router,
    payments_router,
    school_years_router,
    students_router,
    users_router,
)
from .services import seed_service
from .services.database_service import DatabaseService

logger = logging.getLogger("club_admin.app")

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a fully wired application with its own, freshly seeded store.

    Tests pass their own `Settings`; the server module below uses the
    environment.
    """
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db_service = DatabaseService()
    seed_service.run_seed(db_service, settings)

    # --- Application Lifecycle Management ---
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Club admin API started (secure cookies: %s)", settings.secure_cookies)
        yield
        logger.info("Club admin API shutting down")

    app = FastAPI(
        title="Cultural Club Admin API",
        description="Administration backend for the club's school years, courses, classes, students, attendance and payments.",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_service = db_service

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie="club_admin_session",
        max_age=settings.session_max_age,
        https_only=settings.secure_cookies,
        same_site="lax",
    )

    # --- Error Handling ---
    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid input", "errors": jsonable_encoder(exc.errors())},
        )

    # --- API Router Inclusion ---
    logged_in = [Depends(get_current_user_id)]
    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(users_router.router, prefix="/api/users", tags=["Users"], dependencies=[Depends(require_admin)])
    app.include_router(school_years_router.router, prefix="/api/school-years", tags=["School Years"], dependencies=logged_in)
    app.include_router(courses_router.router, prefix="/api/courses", tags=["Courses"], dependencies=logged_in)
    app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"], dependencies=logged_in)
    app.include_router(students_router.router, prefix="/api/students", tags=["Students"], dependencies=logged_in)
    app.include_router(enrollments_router.router, prefix="/api/enrollments", tags=["Enrollments"], dependencies=logged_in)
    app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"], dependencies=logged_in)
    app.include_router(payments_router.router, prefix="/api/payments", tags=["Payments"], dependencies=logged_in)
    app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"], dependencies=logged_in)

    # --- Root / Health Check Endpoint ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {"status": "Club admin API is running!", "version": app.version}

    return app


app = create_app()
