"""Student removal with cascading cleanup."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from registrar.orchestrator.checkpoint import Checkpoint
    from registrar.state_store import (
        CourseRepository,
        EnrollmentRepository,
        StudentRepository,
    )

logger = logging.getLogger(__name__)


class StudentRemoval:
    """Removes a student and everything that references them."""

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
        enrollments: EnrollmentRepository,
        checkpoint_factory: Callable[[], Checkpoint],
    ) -> None:
        self._students = students
        self._courses = courses
        self._enrollments = enrollments
        self._checkpoint_factory = checkpoint_factory

    def remove(self, student_id: str) -> bool:
        """Delete the student after unwinding their enrollments and waitlist entries.

        ENROLLED records give their seat back before deletion; WAITLISTED and
        DROPPED records are deleted as-is. Every course's waitlist is scanned
        because queues are not indexed by student.

        Returns:
            False without side effects if the student does not exist.
        """
        if not self._students.exists(student_id):
            return False

        released = 0
        student_enrollments = self._enrollments.find_by_student(student_id)
        with self._checkpoint_factory() as checkpoint:
            for enrollment in student_enrollments:
                if enrollment.is_enrolled():
                    course = self._courses.find_by_id(enrollment.course_id)
                    if course is not None and checkpoint.release_seat(course):
                        released += 1
                checkpoint.discard(enrollment)
            for course in self._courses.find_all():
                checkpoint.leave_waitlist(student_id, course.course_id)

        self._students.delete(student_id)
        logger.info(
            "Removed student %s (%d enrollments deleted, %d seats released)",
            student_id,
            len(student_enrollments),
            released,
        )
        return True
