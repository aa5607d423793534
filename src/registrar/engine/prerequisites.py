"""Prerequisite Engine - academic requirement checks for a registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.engine.models import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from registrar.state_store import Course, Enrollment, Student


class PrerequisiteEngine:
    """Validates a student against a course's requirement lists.

    Every check is read-only and reports only the first unmet requirement.
    """

    def check_prerequisites(self, student: Student, course: Course) -> ValidationResult:
        """Every prerequisite must be in the student's completed courses."""
        if not course.prerequisites:
            return ValidationResult.success("No prerequisites required")

        for prereq_id in course.prerequisites:
            if not student.has_completed_course(prereq_id):
                return ValidationResult.failure(f"Missing prerequisite: {prereq_id}")

        return ValidationResult.success("All prerequisites satisfied")

    def check_corequisites(
        self,
        student: Student,
        course: Course,
        current_enrollments: Iterable[Enrollment],
    ) -> ValidationResult:
        """Each corequisite must be completed or currently ENROLLED.

        A WAITLISTED or DROPPED enrollment in the corequisite does not count.
        """
        if not course.corequisites:
            return ValidationResult.success("No corequisites required")

        enrolled_course_ids = {e.course_id for e in current_enrollments if e.is_enrolled()}

        for coreq_id in course.corequisites:
            if student.has_completed_course(coreq_id):
                continue
            if coreq_id not in enrolled_course_ids:
                return ValidationResult.failure(f"Missing corequisite: {coreq_id}")

        return ValidationResult.success("All corequisites satisfied")

    def validate_all_requirements(
        self,
        student: Student,
        course: Course,
        current_enrollments: Iterable[Enrollment],
    ) -> ValidationResult:
        """Prerequisites first, then corequisites; stops at the first failure."""
        prereq_result = self.check_prerequisites(student, course)
        if not prereq_result.valid:
            return prereq_result

        coreq_result = self.check_corequisites(student, course, current_enrollments)
        if not coreq_result.valid:
            return coreq_result

        return ValidationResult.success("All requirements satisfied")

    def check_semester_requirement(
        self, student: Student, course: Course, min_semester: int
    ) -> bool:
        return student.semester >= min_semester

    def check_credit_limit(
        self, student: Student, additional_credits: int, max_credits: int
    ) -> ValidationResult:
        total_credits = student.current_credits + additional_credits
        if total_credits <= max_credits:
            return ValidationResult.success("Credit limit satisfied")
        return ValidationResult.failure(
            f"Credit limit exceeded: {total_credits} > {max_credits}"
        )

    def check_advanced_eligibility(
        self,
        student: Student,
        course: Course,
        min_gpa: float,
        min_semester: int,
    ) -> bool:
        """Eligibility for an advanced course.

        The student must reach ``min_semester`` and then be either well
        ahead (more than two semesters past the minimum) or hold every
        prerequisite.

        ``min_gpa`` is accepted but not consulted: no GPA is tracked, and
        whether a GPA gate was intended is still an open product question.
        """
        if student.semester < min_semester:
            return False

        well_ahead = student.semester > min_semester + 2
        return well_ahead or self.check_prerequisites(student, course).valid
