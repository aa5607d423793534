"""Seat Allocator - capacity decisions over a course's enrolled counter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.engine.models import AllocationResult

if TYPE_CHECKING:
    from registrar.state_store import Course


class SeatAllocator:
    """Allocates and releases seats on the course it is handed.

    Holds no state of its own. ``allocate`` and ``release`` mutate
    ``course.enrolled`` in place and keep ``0 <= enrolled <= capacity``;
    persisting the course is the caller's job.
    """

    def allocate(self, course: Course) -> AllocationResult:
        """Take a seat if one is free.

        Returns:
            An allocated result, or a waitlisted result when the course is
            full (including capacity 0). Never raises for fullness.
        """
        if course.enrolled < course.capacity:
            course.increment_enrolled()
            return AllocationResult.success()
        return AllocationResult.full()

    def release(self, course: Course) -> bool:
        """Give back one seat. No-op returning False when nobody is enrolled."""
        if course.enrolled > 0:
            course.decrement_enrolled()
            return True
        return False

    def has_available_seats(self, course: Course) -> bool:
        return course.enrolled < course.capacity

    def is_at_capacity(self, course: Course) -> bool:
        return course.enrolled >= course.capacity

    def available_seats(self, course: Course) -> int:
        """Free seats, clamped to 0 for an over-capacity course."""
        return max(0, course.capacity - course.enrolled)

    def has_one_seat_remaining(self, course: Course) -> bool:
        return course.capacity - course.enrolled == 1

    def utilization(self, course: Course) -> float:
        """Percentage of capacity in use; 0.0 for a zero-capacity course."""
        if course.capacity == 0:
            return 0.0
        return course.enrolled / course.capacity * 100.0

    def is_valid_allocation(self, course: Course) -> bool:
        return 0 <= course.enrolled <= course.capacity

    def can_accommodate(self, course: Course, number_of_students: int) -> bool:
        """Check room for a group using unclamped arithmetic.

        Unlike ``available_seats`` this is not clamped, so an over-capacity
        course can still accommodate a non-positive group size.
        """
        return course.capacity - course.enrolled >= number_of_students
