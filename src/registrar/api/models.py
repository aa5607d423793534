"""Pydantic models for REST API."""

from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Student models


class StudentCreate(BaseModel):
    """Request model for creating a student."""

    student_id: str = Field(..., min_length=1, max_length=50)
    name: str = Field(..., min_length=1, max_length=255)
    program: str = Field(default="", max_length=255)
    semester: int = Field(default=1, ge=1)
    completed_courses: list[str] = Field(default_factory=list)
    current_credits: int = Field(default=0, ge=0)


class CompletedCourseAdd(BaseModel):
    """Request model for recording a completed course."""

    course_id: str = Field(..., min_length=1, max_length=50)


class StudentResponse(BaseModel):
    """Response model for a student."""

    model_config = ConfigDict(from_attributes=True)

    student_id: str
    name: str
    program: str
    semester: int
    completed_courses: list[str]
    current_credits: int


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student model to StudentResponse."""
    return StudentResponse.model_validate(student)


# Course models


class CourseCreate(BaseModel):
    """Request model for creating a course."""

    course_id: str = Field(..., min_length=1, max_length=50)
    course_name: str = Field(..., min_length=1, max_length=255)
    credits: int = Field(default=3, ge=0)
    capacity: int = Field(..., ge=0)
    waitlist_capacity: int = Field(default=0, ge=0)
    prerequisites: list[str] = Field(default_factory=list)
    corequisites: list[str] = Field(default_factory=list)


class CourseResponse(BaseModel):
    """Response model for a course."""

    model_config = ConfigDict(from_attributes=True)

    course_id: str
    course_name: str
    credits: int
    capacity: int
    enrolled: int
    waitlist_capacity: int
    prerequisites: list[str]
    corequisites: list[str]


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course model to CourseResponse."""
    return CourseResponse.model_validate(course)


class SeatsResponse(BaseModel):
    """Seat availability for a course."""

    course_id: str
    capacity: int
    enrolled: int
    available: int
    utilization: float
    waitlist_size: int
    waitlist_capacity: int


class WaitlistResponse(BaseModel):
    """Waitlist contents for a course, head first."""

    course_id: str
    students: list[str]


# Enrollment models


class EnrollmentResponse(BaseModel):
    """Response model for an enrollment."""

    model_config = ConfigDict(from_attributes=True)

    enrollment_id: str
    student_id: str
    course_id: str
    status: str
    enrolled_date: date


def enrollment_to_response(enrollment: Any) -> EnrollmentResponse:
    """Convert an Enrollment model to EnrollmentResponse."""
    return EnrollmentResponse.model_validate(enrollment)


# Registration models


class RegistrationRequest(BaseModel):
    """Request model for registering or dropping."""

    student_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)


class RegistrationResponse(BaseModel):
    """Response model for a successful registration."""

    enrollment_id: str
    status: str
    message: str


class DropResponse(BaseModel):
    """Response model for a drop."""

    dropped: bool


class EligibilityResponse(BaseModel):
    """Response model for an eligibility check."""

    valid: bool
    message: str


class WaitlistPositionResponse(BaseModel):
    """Waitlist position; ``position`` is None when not on the waitlist."""

    student_id: str
    course_id: str
    position: int | None


# Statistics models


class OverviewResponse(BaseModel):
    """System-wide enrollment aggregates."""

    total_capacity: int
    total_enrolled: int
    utilization_rate: float
    average_enrollment_per_course: float
    active_enrollments: int
    waitlisted_students: int
    enrollment_by_department: dict[str, int]
    courses_by_enrollment_level: dict[str, int]


class FillRateResponse(BaseModel):
    """Fill rate for one course."""

    course_id: str
    fill_rate: float
