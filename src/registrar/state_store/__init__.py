"""State Store - Entity lookup tables for students, courses and enrollments."""

from registrar.state_store.database import Database
from registrar.state_store.exceptions import (
    CourseExistsError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from registrar.state_store.interfaces import (
    CourseRepository,
    EnrollmentRepository,
    StudentRepository,
)
from registrar.state_store.models import (
    Course,
    Enrollment,
    EnrollmentStatus,
    Student,
)
from registrar.state_store.store import (
    CourseStore,
    EnrollmentStore,
    StateStore,
    StudentStore,
)

__all__ = [
    "Course",
    "CourseExistsError",
    "CourseNotFoundError",
    "CourseRepository",
    "CourseStore",
    "Database",
    "Enrollment",
    "EnrollmentNotFoundError",
    "EnrollmentRepository",
    "EnrollmentStatus",
    "EnrollmentStore",
    "StateStore",
    "StateStoreError",
    "Student",
    "StudentExistsError",
    "StudentNotFoundError",
    "StudentRepository",
    "StudentStore",
]
