"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from registrar import __version__
from registrar.api.dependencies import (
    close_registrar,
    close_state_store,
    init_registrar,
    init_state_store,
)
from registrar.api.models import APIResponse
from registrar.api.routes import courses, registrations, stats, students
from registrar.state_store import (
    CourseExistsError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    db_path = getattr(app.state, "db_path", ":memory:")
    max_credits = getattr(app.state, "max_credits", None)
    store = init_state_store(db_path)
    init_registrar(store, max_credits=max_credits)

    yield
    # Shutdown
    close_registrar()
    close_state_store()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def create_app(db_path: str = ":memory:", max_credits: int | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        db_path: SQLite database path, ``:memory:`` for a throwaway store.
        max_credits: Optional credit-load ceiling applied to registrations.
    """
    app = FastAPI(
        title="Registrar API",
        description="REST API for course registration",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path
    app.state.max_credits = max_credits

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(StudentNotFoundError)
    async def student_not_found_handler(
        _request: Request, _exc: StudentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Student not found")

    @app.exception_handler(CourseNotFoundError)
    async def course_not_found_handler(
        _request: Request, _exc: CourseNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Course not found")

    @app.exception_handler(EnrollmentNotFoundError)
    async def enrollment_not_found_handler(
        _request: Request, _exc: EnrollmentNotFoundError
    ) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, "Enrollment not found")

    @app.exception_handler(StudentExistsError)
    async def student_exists_handler(_request: Request, _exc: StudentExistsError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, "Student with this id already exists")

    @app.exception_handler(CourseExistsError)
    async def course_exists_handler(_request: Request, _exc: CourseExistsError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, "Course with this id already exists")

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(_request: Request, _exc: StateStoreError) -> JSONResponse:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Include routers
    app.include_router(students.router, prefix="/api/v1")
    app.include_router(courses.router, prefix="/api/v1")
    app.include_router(registrations.router, prefix="/api/v1")
    app.include_router(stats.router, prefix="/api/v1")

    return app
