"""SQLAlchemy models for State Store."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import StrEnum
from typing import Any

from sqlalchemy import JSON, Date, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class EnrollmentStatus(StrEnum):
    """Enrollment status enum."""

    ENROLLED = "enrolled"
    WAITLISTED = "waitlisted"
    DROPPED = "dropped"


def _unique(values: Iterable[str] | None) -> list[str]:
    """Copy values into a list, dropping repeats but keeping first-seen order."""
    result: list[str] = []
    for value in values or ():
        if value not in result:
            result.append(value)
    return result


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Course(Base):
    """Course model - seat capacity, waitlist capacity and requirements."""

    __tablename__ = "courses"

    course_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    course_name: Mapped[str] = mapped_column(String(255), nullable=False)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    enrolled: Mapped[int] = mapped_column(Integer, nullable=False)
    waitlist_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    prerequisites: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    corequisites: Mapped[list[str]] = mapped_column(JSON, nullable=False)

    def __init__(
        self,
        course_id: str,
        course_name: str = "",
        credits: int = 0,
        capacity: int = 0,
        waitlist_capacity: int = 0,
        prerequisites: Iterable[str] | None = None,
        corequisites: Iterable[str] | None = None,
        enrolled: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.course_id = course_id
        self.course_name = course_name
        self.credits = credits
        self.capacity = capacity
        self.enrolled = enrolled
        self.waitlist_capacity = waitlist_capacity
        self.prerequisites = list(prerequisites or [])
        self.corequisites = list(corequisites or [])

    @property
    def available_seats(self) -> int:
        """Raw remaining seats; negative when over capacity."""
        return self.capacity - self.enrolled

    def has_available_seats(self) -> bool:
        return self.enrolled < self.capacity

    def is_full(self) -> bool:
        return self.enrolled >= self.capacity

    def increment_enrolled(self) -> None:
        self.enrolled += 1

    def decrement_enrolled(self) -> None:
        if self.enrolled > 0:
            self.enrolled -= 1

    def add_prerequisite(self, course_id: str) -> None:
        if course_id not in self.prerequisites:
            self.prerequisites = [*self.prerequisites, course_id]

    def add_corequisite(self, course_id: str) -> None:
        if course_id not in self.corequisites:
            self.corequisites = [*self.corequisites, course_id]

    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)

    def has_corequisites(self) -> bool:
        return bool(self.corequisites)

    def __repr__(self) -> str:
        return (
            f"<Course(course_id={self.course_id!r}, enrolled={self.enrolled!r}, "
            f"capacity={self.capacity!r})>"
        )


class Student(Base):
    """Student model - academic history and current credit load."""

    __tablename__ = "students"

    student_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    program: Mapped[str] = mapped_column(String(255), nullable=False)
    semester: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_courses: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    current_credits: Mapped[int] = mapped_column(Integer, nullable=False)

    def __init__(
        self,
        student_id: str,
        name: str = "",
        program: str = "",
        semester: int = 1,
        completed_courses: Iterable[str] | None = None,
        current_credits: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.student_id = student_id
        self.name = name
        self.program = program
        self.semester = semester
        self.completed_courses = _unique(completed_courses)
        self.current_credits = current_credits

    def add_completed_course(self, course_id: str) -> None:
        if course_id not in self.completed_courses:
            self.completed_courses = [*self.completed_courses, course_id]

    def has_completed_course(self, course_id: str) -> bool:
        return course_id in self.completed_courses

    def add_credits(self, credits: int) -> None:
        self.current_credits += credits

    def remove_credits(self, credits: int) -> None:
        """Subtract credits, never going below zero."""
        self.current_credits = max(0, self.current_credits - credits)

    def __repr__(self) -> str:
        return (
            f"<Student(student_id={self.student_id!r}, semester={self.semester!r}, "
            f"current_credits={self.current_credits!r})>"
        )


class Enrollment(Base):
    """Enrollment model - one registration lineage of a student in a course."""

    __tablename__ = "enrollments"

    enrollment_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    student_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    course_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    enrolled_date: Mapped[date] = mapped_column(Date, nullable=False)

    def __init__(
        self,
        student_id: str,
        course_id: str,
        status: EnrollmentStatus | str = EnrollmentStatus.ENROLLED,
        enrollment_id: str | None = None,
        enrolled_date: date | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        # Empty until the enrollment store assigns the next sequence value
        self.enrollment_id = enrollment_id  # type: ignore[assignment]
        self.student_id = student_id
        self.course_id = course_id
        self.status = EnrollmentStatus(status).value
        self.enrolled_date = enrolled_date if enrolled_date is not None else date.today()

    @property
    def enrollment_status(self) -> EnrollmentStatus:
        """Get status as EnrollmentStatus enum."""
        return EnrollmentStatus(self.status)

    @enrollment_status.setter
    def enrollment_status(self, value: EnrollmentStatus) -> None:
        """Set status from EnrollmentStatus enum."""
        self.status = value.value

    def is_enrolled(self) -> bool:
        return self.status == EnrollmentStatus.ENROLLED

    def is_waitlisted(self) -> bool:
        return self.status == EnrollmentStatus.WAITLISTED

    def is_dropped(self) -> bool:
        return self.status == EnrollmentStatus.DROPPED

    def enroll(self) -> None:
        self.enrollment_status = EnrollmentStatus.ENROLLED

    def waitlist(self) -> None:
        self.enrollment_status = EnrollmentStatus.WAITLISTED

    def drop(self) -> None:
        self.enrollment_status = EnrollmentStatus.DROPPED

    def __repr__(self) -> str:
        return (
            f"<Enrollment(enrollment_id={self.enrollment_id!r}, student_id={self.student_id!r}, "
            f"course_id={self.course_id!r}, status={self.status!r})>"
        )
