"""REST API for the registrar."""

from registrar.api.app import create_app
from registrar.api.models import (
    APIResponse,
    CourseCreate,
    CourseResponse,
    RegistrationRequest,
    StudentCreate,
    StudentResponse,
)

__all__ = [
    "APIResponse",
    "CourseCreate",
    "CourseResponse",
    "RegistrationRequest",
    "StudentCreate",
    "StudentResponse",
    "create_app",
]
