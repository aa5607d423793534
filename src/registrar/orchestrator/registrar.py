"""Registrar - registration and drop workflows over the engines and stores."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from registrar.engine import ValidationResult
from registrar.orchestrator.cascade import StudentRemoval
from registrar.orchestrator.checkpoint import Checkpoint
from registrar.orchestrator.models import RegistrationResult
from registrar.state_store import EnrollmentStatus

if TYPE_CHECKING:
    from registrar.engine import PrerequisiteEngine, SeatAllocator, WaitlistManager
    from registrar.state_store import (
        Course,
        CourseRepository,
        Enrollment,
        EnrollmentRepository,
        Student,
        StudentRepository,
    )

logger = logging.getLogger(__name__)

ALREADY_ENROLLED = "Student already enrolled in this course"
WAITLIST_FULL = "Course full and waitlist is at capacity"


class Registrar:
    """Drives the per-(student, course) enrollment state machine.

    The Registrar:
    - Registers students, allocating a seat or falling back to the waitlist
    - Drops registrations, releasing seats and credits
    - Promotes the head of the waitlist into a freed seat
    - Removes students along with their enrollments and waitlist entries

    Failures are returned as result values, never raised. Each public
    workflow holds a single re-entrant lock for its whole duration, since
    it reads and then writes seat counts, credits, enrollment status and
    waitlist membership across several entities.
    """

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
        enrollments: EnrollmentRepository,
        prerequisite_engine: PrerequisiteEngine,
        seat_allocator: SeatAllocator,
        waitlist_manager: WaitlistManager,
        max_credits: int | None = None,
    ) -> None:
        """Initialize the Registrar.

        Args:
            students: Student store.
            courses: Course store.
            enrollments: Enrollment store.
            prerequisite_engine: Requirement validation.
            seat_allocator: Seat decisions on course counters.
            waitlist_manager: Per-course waitlist queues.
            max_credits: Optional credit-load ceiling checked before a seat
                or waitlist slot is taken and again before a promotion.
                None disables the check.
        """
        self.students = students
        self.courses = courses
        self.enrollments = enrollments
        self.prerequisite_engine = prerequisite_engine
        self.seat_allocator = seat_allocator
        self.waitlist_manager = waitlist_manager
        self.max_credits = max_credits
        self._lock = threading.RLock()
        self._removal = StudentRemoval(
            students=students,
            courses=courses,
            enrollments=enrollments,
            checkpoint_factory=self._checkpoint,
        )

    # --- Workflows ---

    def register(self, student_id: str, course_id: str) -> RegistrationResult:
        """Register a student for a course.

        Returns:
            Success with status ENROLLED when a seat was allocated, or
            WAITLISTED when the student joined the waitlist. Otherwise a
            failure naming the first gate that rejected the request.
        """
        with self._lock:
            student = self.students.find_by_id(student_id)
            if student is None:
                return self._rejected(student_id, course_id, f"Student not found: {student_id}")

            course = self.courses.find_by_id(course_id)
            if course is None:
                return self._rejected(student_id, course_id, f"Course not found: {course_id}")

            gate = self._check_requirements(student, course)
            if not gate.valid:
                return self._rejected(student_id, course_id, gate.message)

            with self._checkpoint() as checkpoint:
                allocation = checkpoint.allocate_seat(course)

                if allocation.allocated:
                    enrollment = checkpoint.new_enrollment(
                        student_id, course_id, EnrollmentStatus.ENROLLED
                    )
                    checkpoint.add_credits(student, course.credits)
                elif checkpoint.join_waitlist(student_id, course):
                    enrollment = checkpoint.new_enrollment(
                        student_id, course_id, EnrollmentStatus.WAITLISTED
                    )
                else:
                    return self._rejected(student_id, course_id, WAITLIST_FULL)

            logger.info(
                "Student %s %s in %s (%s)",
                student_id,
                enrollment.status,
                course_id,
                enrollment.enrollment_id,
            )
            return RegistrationResult.registered(
                enrollment.enrollment_id, enrollment.enrollment_status
            )

    def drop(self, student_id: str, course_id: str) -> bool:
        """Drop a student's active registration in a course.

        An ENROLLED drop frees the seat and credits and then promotes the
        head of the waitlist. A WAITLISTED drop only leaves the queue.

        Returns:
            True once the enrollment is marked DROPPED; False when there is
            nothing to drop or the student/course no longer exist.
        """
        with self._lock:
            enrollment = self.enrollments.find_by_student_and_course(student_id, course_id)
            if enrollment is None or enrollment.is_dropped():
                return False

            course = self.courses.find_by_id(course_id)
            student = self.students.find_by_id(student_id)
            if course is None or student is None:
                return False

            with self._checkpoint() as checkpoint:
                if enrollment.is_enrolled():
                    checkpoint.release_seat(course)
                    checkpoint.remove_credits(student, course.credits)

                    promoted_id = checkpoint.promote_from_waitlist(course)
                    if promoted_id is not None:
                        self._promote(checkpoint, promoted_id, course)
                elif enrollment.is_waitlisted():
                    checkpoint.leave_waitlist(student_id, course_id)

                checkpoint.set_status(enrollment, EnrollmentStatus.DROPPED)

            logger.info("Student %s dropped %s", student_id, course_id)
            return True

    def check_eligibility(self, student_id: str, course_id: str) -> ValidationResult:
        """Run the registration gates without allocating anything.

        Covers existence, duplicates and requirements, plus the credit-load
        gate when ``max_credits`` is set. A pass reports the requirements
        message ("All requirements satisfied") even when the credit gate
        also ran.
        """
        with self._lock:
            student = self.students.find_by_id(student_id)
            if student is None:
                return ValidationResult.failure(f"Student not found: {student_id}")

            course = self.courses.find_by_id(course_id)
            if course is None:
                return ValidationResult.failure(f"Course not found: {course_id}")

            return self._check_requirements(student, course)

    def remove_student(self, student_id: str) -> bool:
        """Delete a student, unwinding enrollments and waitlist entries.

        Returns:
            False if the student never existed, True otherwise.
        """
        with self._lock:
            return self._removal.remove(student_id)

    def restore_waitlists(self) -> int:
        """Rebuild the in-memory waitlists from stored WAITLISTED enrollments.

        Enrollment IDs are issued in sequence, so ID order is the order in
        which students joined each queue.

        Returns:
            Number of students put back on a waitlist.
        """
        with self._lock:
            restored = 0
            for course in self.courses.find_all():
                waiting = [
                    e.student_id
                    for e in self.enrollments.find_by_course(course.course_id)
                    if e.is_waitlisted()
                ]
                self.waitlist_manager.restore(course.course_id, waiting)
                restored += len(waiting)
            if restored:
                logger.info("Restored %d waitlisted students from the store", restored)
            return restored

    # --- Read-only projections ---

    def get_waitlist_position(self, student_id: str, course_id: str) -> int:
        """1-based waitlist position, or ``NOT_ON_WAITLIST``."""
        return self.waitlist_manager.position(student_id, course_id)

    def get_student_enrollments(self, student_id: str) -> list[Enrollment]:
        return self.enrollments.find_by_student(student_id)

    def get_course_enrollments(self, course_id: str) -> list[Enrollment]:
        return self.enrollments.find_by_course(course_id)

    def has_available_seats(self, course_id: str) -> bool:
        course = self.courses.find_by_id(course_id)
        if course is None:
            return False
        return self.seat_allocator.has_available_seats(course)

    # --- Internals ---

    def _checkpoint(self) -> Checkpoint:
        return Checkpoint(
            students=self.students,
            courses=self.courses,
            enrollments=self.enrollments,
            seat_allocator=self.seat_allocator,
            waitlist_manager=self.waitlist_manager,
        )

    def _check_requirements(self, student: Student, course: Course) -> ValidationResult:
        """Duplicate, requirement and credit gates shared by register and eligibility."""
        existing = self.enrollments.find_by_student_and_course(
            student.student_id, course.course_id
        )
        if existing is not None:
            return ValidationResult.failure(ALREADY_ENROLLED)

        current_enrollments = self.enrollments.find_active_by_student(student.student_id)
        requirements = self.prerequisite_engine.validate_all_requirements(
            student, course, current_enrollments
        )
        if not requirements.valid:
            return ValidationResult.failure(f"Prerequisites not met: {requirements.message}")

        if self.max_credits is not None:
            credit_check = self.prerequisite_engine.check_credit_limit(
                student, course.credits, self.max_credits
            )
            if not credit_check.valid:
                return credit_check

        return requirements

    def _promote(self, checkpoint: Checkpoint, student_id: str, course: Course) -> bool:
        """Move a promoted waitlister into the seat just freed on ``course``.

        ``course`` is the in-flight instance from the drop, not a fresh
        read. Any inconsistency, or a promotion that would break the
        credit-load ceiling, leaves the seat unassigned.
        """
        enrollment = self.enrollments.find_by_student_and_course(student_id, course.course_id)
        if enrollment is None or not enrollment.is_waitlisted():
            logger.warning(
                "No waitlisted enrollment for promoted student %s in %s; seat left open",
                student_id,
                course.course_id,
            )
            return False

        student = self.students.find_by_id(student_id)
        if student is None:
            logger.warning("Promoted student %s no longer exists", student_id)
            return False

        if self.max_credits is not None:
            credit_check = self.prerequisite_engine.check_credit_limit(
                student, course.credits, self.max_credits
            )
            if not credit_check.valid:
                logger.warning(
                    "Promoting %s in %s blocked (%s); seat left open",
                    student_id,
                    course.course_id,
                    credit_check.message,
                )
                return False

        if not checkpoint.allocate_seat(course).allocated:
            logger.warning(
                "Seat allocation failed while promoting %s in %s", student_id, course.course_id
            )
            return False

        checkpoint.set_status(enrollment, EnrollmentStatus.ENROLLED)
        checkpoint.add_credits(student, course.credits)
        logger.info("Promoted student %s from waitlist in %s", student_id, course.course_id)
        return True

    def _rejected(self, student_id: str, course_id: str, message: str) -> RegistrationResult:
        logger.debug("Registration of %s in %s rejected: %s", student_id, course_id, message)
        return RegistrationResult.failure(message)
