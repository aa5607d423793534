"""Store interfaces consumed by the engines and the orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from registrar.state_store.models import Course, Enrollment, EnrollmentStatus, Student


class StudentRepository(Protocol):
    """Interface for student lookup and persistence."""

    def save(self, student: Student) -> Student:
        """Insert or update a student by primary key."""
        ...

    def find_by_id(self, student_id: str) -> Student | None:
        """Return the student, or None when absent."""
        ...

    def find_all(self) -> list[Student]:
        """Return every stored student."""
        ...

    def exists(self, student_id: str) -> bool:
        """Check whether a student is stored."""
        ...

    def delete(self, student_id: str) -> bool:
        """Delete the student record only; returns whether it existed."""
        ...


class CourseRepository(Protocol):
    """Interface for course lookup and persistence."""

    def save(self, course: Course) -> Course:
        """Insert or update a course by primary key."""
        ...

    def find_by_id(self, course_id: str) -> Course | None:
        """Return the course, or None when absent."""
        ...

    def find_all(self) -> list[Course]:
        """Return every stored course."""
        ...

    def exists(self, course_id: str) -> bool:
        """Check whether a course is stored."""
        ...

    def delete(self, course_id: str) -> bool:
        """Delete the course; returns whether it existed."""
        ...


class EnrollmentRepository(Protocol):
    """Interface for enrollment lookup and persistence."""

    def save(self, enrollment: Enrollment) -> Enrollment:
        """Insert or update an enrollment, assigning an ID when missing."""
        ...

    def find_by_id(self, enrollment_id: str) -> Enrollment | None:
        """Return the enrollment, or None when absent."""
        ...

    def find_all(self) -> list[Enrollment]:
        """Return every stored enrollment."""
        ...

    def exists(self, enrollment_id: str) -> bool:
        """Check whether an enrollment is stored."""
        ...

    def delete(self, enrollment_id: str) -> bool:
        """Delete the enrollment; returns whether it existed."""
        ...

    def find_by_student(self, student_id: str) -> list[Enrollment]:
        """All enrollments of a student, any status."""
        ...

    def find_by_course(self, course_id: str) -> list[Enrollment]:
        """All enrollments in a course, any status."""
        ...

    def find_active_by_student(self, student_id: str) -> list[Enrollment]:
        """Enrollments of a student with status ENROLLED."""
        ...

    def find_by_student_and_course(self, student_id: str, course_id: str) -> Enrollment | None:
        """First non-dropped enrollment for the pair, or None."""
        ...

    def is_student_enrolled(self, student_id: str, course_id: str) -> bool:
        """True only for an ENROLLED (not WAITLISTED) pair."""
        ...

    def count_by_course_and_status(self, course_id: str, status: EnrollmentStatus) -> int:
        """Number of enrollments in a course with the given status."""
        ...
