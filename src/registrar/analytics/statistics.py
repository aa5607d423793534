"""Enrollment statistics over the course and enrollment stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from registrar.state_store import Course, CourseRepository, EnrollmentRepository

UNKNOWN_DEPARTMENT = "UNKNOWN"
ENROLLMENT_LEVELS = ("empty", "low", "medium", "high", "full")


def extract_department(course_id: str | None) -> str:
    """Department prefix of a course ID: everything before the first digit.

    "CS101" -> "CS". IDs that are empty or start with a digit map to
    ``UNKNOWN_DEPARTMENT``.
    """
    if not course_id:
        return UNKNOWN_DEPARTMENT
    for index, char in enumerate(course_id):
        if char.isdigit():
            return course_id[:index] if index > 0 else UNKNOWN_DEPARTMENT
    return course_id


class EnrollmentStatistics:
    """Read-only aggregates for reporting."""

    def __init__(
        self,
        courses: CourseRepository,
        enrollments: EnrollmentRepository,
    ) -> None:
        self._courses = courses
        self._enrollments = enrollments

    def fill_rate(self, course_id: str) -> float | None:
        """Percentage of seats taken; None for an unknown course."""
        course = self._courses.find_by_id(course_id)
        if course is None:
            return None
        return _fill_rate(course)

    def most_popular_courses(self, top_n: int) -> list[Course]:
        if top_n <= 0:
            return []
        ranked = sorted(self._courses.find_all(), key=lambda c: c.enrolled, reverse=True)
        return ranked[:top_n]

    def average_enrollment_per_course(self) -> float:
        courses = self._courses.find_all()
        if not courses:
            return 0.0
        return sum(c.enrolled for c in courses) / len(courses)

    def enrollment_by_department(self) -> dict[str, int]:
        totals: dict[str, int] = {}
        for course in self._courses.find_all():
            department = extract_department(course.course_id)
            totals[department] = totals.get(department, 0) + course.enrolled
        return totals

    def total_active_enrollments(self) -> int:
        return sum(1 for e in self._enrollments.find_all() if e.is_enrolled())

    def total_waitlisted_students(self) -> int:
        return sum(1 for e in self._enrollments.find_all() if e.is_waitlisted())

    def courses_above_threshold(self, threshold_percentage: float) -> list[Course]:
        """Courses filled to at least the threshold; empty outside 0..100."""
        if threshold_percentage < 0 or threshold_percentage > 100:
            return []
        return [c for c in self._courses.find_all() if _fill_rate(c) >= threshold_percentage]

    def average_class_size(self, min_enrollment: int) -> float:
        """Mean enrolled count over courses with at least ``min_enrollment``."""
        if min_enrollment < 0:
            return 0.0
        courses = [c for c in self._courses.find_all() if c.enrolled >= min_enrollment]
        if not courses:
            return 0.0
        return sum(c.enrolled for c in courses) / len(courses)

    def total_system_capacity(self) -> int:
        return sum(c.capacity for c in self._courses.find_all())

    def total_enrolled_students(self) -> int:
        return sum(c.enrolled for c in self._courses.find_all())

    def system_utilization_rate(self) -> float:
        total_capacity = self.total_system_capacity()
        if total_capacity == 0:
            return 0.0
        return self.total_enrolled_students() * 100.0 / total_capacity

    def full_courses(self) -> list[Course]:
        return [c for c in self._courses.find_all() if c.is_full()]

    def courses_by_enrollment_level(self) -> dict[str, int]:
        """Bucket courses by fill rate: empty, low (<25), medium (<50), high (<100), full."""
        levels = dict.fromkeys(ENROLLMENT_LEVELS, 0)
        for course in self._courses.find_all():
            levels[_enrollment_level(_fill_rate(course))] += 1
        return levels


def _fill_rate(course: Course) -> float:
    if course.capacity == 0:
        return 0.0
    return course.enrolled * 100.0 / course.capacity


def _enrollment_level(fill_rate: float) -> str:
    if fill_rate == 0:
        return "empty"
    if fill_rate < 25:
        return "low"
    if fill_rate < 50:
        return "medium"
    if fill_rate < 100:
        return "high"
    return "full"
