"""Checkpoint - pairs every workflow mutation with its persistence write."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.state_store import Course, Enrollment, EnrollmentStatus, Student

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from registrar.engine import AllocationResult, SeatAllocator, WaitlistManager
    from registrar.state_store import (
        CourseRepository,
        EnrollmentRepository,
        StudentRepository,
    )


class Checkpoint:
    """Unit of work for one orchestrator workflow.

    Workflows never mutate an entity or a waitlist directly: each mutating
    step goes through a checkpoint method, which applies the change and
    records the entity as dirty. Leaving the ``with`` block normally saves
    every dirty entity and then performs queued deletions.

    Waitlists are in memory, so their changes are applied immediately and
    undone if the block raises or a save fails during commit. Entities
    need no undo: workflows re-read them from the stores.
    """

    def __init__(
        self,
        students: StudentRepository,
        courses: CourseRepository,
        enrollments: EnrollmentRepository,
        seat_allocator: SeatAllocator,
        waitlist_manager: WaitlistManager,
    ) -> None:
        self._students = students
        self._courses = courses
        self._enrollments = enrollments
        self._seat_allocator = seat_allocator
        self._waitlist_manager = waitlist_manager
        self._dirty: list[Course | Student | Enrollment] = []
        self._deleted: list[Enrollment] = []
        self._undo: list[Callable[[], None]] = []

    def __enter__(self) -> Checkpoint:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    # --- Seats ---

    def allocate_seat(self, course: Course) -> AllocationResult:
        result = self._seat_allocator.allocate(course)
        if result.allocated:
            self._touch(course)
        return result

    def release_seat(self, course: Course) -> bool:
        released = self._seat_allocator.release(course)
        if released:
            self._touch(course)
        return released

    # --- Credits ---

    def add_credits(self, student: Student, credits: int) -> None:
        student.add_credits(credits)
        self._touch(student)

    def remove_credits(self, student: Student, credits: int) -> None:
        student.remove_credits(credits)
        self._touch(student)

    # --- Waitlists ---

    def join_waitlist(self, student_id: str, course: Course) -> bool:
        added = self._waitlist_manager.add(student_id, course)
        if added:
            self._undo.append(
                lambda: self._waitlist_manager.remove(student_id, course.course_id)
            )
        return added

    def leave_waitlist(self, student_id: str, course_id: str) -> bool:
        index = self._waitlist_manager.position(student_id, course_id) - 1
        removed = self._waitlist_manager.remove(student_id, course_id)
        if removed:
            self._undo.append(
                lambda: self._waitlist_manager.reinsert(student_id, course_id, index)
            )
        return removed

    def promote_from_waitlist(self, course: Course) -> str | None:
        """Pop the head of the course's waitlist; it returns to the head on rollback."""
        promoted_id = self._waitlist_manager.promote(course)
        if promoted_id is not None:
            self._undo.append(
                lambda: self._waitlist_manager.reinsert(promoted_id, course.course_id, 0)
            )
        return promoted_id

    # --- Enrollments ---

    def new_enrollment(
        self, student_id: str, course_id: str, status: EnrollmentStatus
    ) -> Enrollment:
        """Create an enrollment that will be saved (and given an ID) on commit."""
        enrollment = Enrollment(student_id=student_id, course_id=course_id, status=status)
        self._touch(enrollment)
        return enrollment

    def set_status(self, enrollment: Enrollment, status: EnrollmentStatus) -> None:
        enrollment.enrollment_status = status
        self._touch(enrollment)

    def discard(self, enrollment: Enrollment) -> None:
        """Queue an enrollment record for deletion."""
        self._deleted.append(enrollment)

    # --- Persistence ---

    def commit(self) -> None:
        """Write all dirty entities, then delete discarded enrollments."""
        for entity in self._dirty:
            if isinstance(entity, Course):
                self._courses.save(entity)
            elif isinstance(entity, Student):
                self._students.save(entity)
            else:
                self._enrollments.save(entity)
        for enrollment in self._deleted:
            self._enrollments.delete(enrollment.enrollment_id)
        self._reset()

    def rollback(self) -> None:
        """Undo waitlist changes, newest first, and forget pending writes."""
        for undo in reversed(self._undo):
            undo()
        self._reset()

    def _reset(self) -> None:
        self._dirty.clear()
        self._deleted.clear()
        self._undo.clear()

    def _touch(self, entity: Course | Student | Enrollment) -> None:
        if not any(existing is entity for existing in self._dirty):
            self._dirty.append(entity)
