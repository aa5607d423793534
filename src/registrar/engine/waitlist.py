"""Waitlist Manager - per-course FIFO queues of waiting students."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from registrar.engine.seat_allocator import SeatAllocator
    from registrar.state_store import Course

logger = logging.getLogger(__name__)

NOT_ON_WAITLIST = -1
"""Sentinel returned by ``WaitlistManager.position`` for an absent student."""


class WaitlistManager:
    """Keeps one duplicate-free FIFO queue of student IDs per course.

    Queues are created lazily on the first admission attempt. Every
    accessor treats a missing queue as empty.
    """

    def __init__(self, seat_allocator: SeatAllocator) -> None:
        """Initialize the WaitlistManager.

        Args:
            seat_allocator: Used by ``promote`` to check seat availability.
        """
        self._seat_allocator = seat_allocator
        self._waitlists: dict[str, deque[str]] = {}

    def add(self, student_id: str, course: Course) -> bool:
        """Append a student to the course's waitlist.

        Returns:
            False if the waitlist is at capacity or the student is already
            on it; True once enqueued.
        """
        waitlist = self._waitlists.setdefault(course.course_id, deque())

        if len(waitlist) >= course.waitlist_capacity:
            logger.debug("Waitlist for %s is full (%d)", course.course_id, len(waitlist))
            return False
        if student_id in waitlist:
            return False

        waitlist.append(student_id)
        logger.debug(
            "Student %s waitlisted for %s at position %d",
            student_id,
            course.course_id,
            len(waitlist),
        )
        return True

    def remove(self, student_id: str, course_id: str) -> bool:
        """Remove a student from anywhere in the queue, keeping the others' order."""
        waitlist = self._waitlists.get(course_id)
        if waitlist is None or student_id not in waitlist:
            return False
        waitlist.remove(student_id)
        return True

    def promote(self, course: Course) -> str | None:
        """Pop the head of the queue if a seat is available.

        Only the name leaves the queue; allocating the seat and updating
        the enrollment belong to the caller.

        Returns:
            The promoted student ID, or None when there is no queue, the
            queue is empty, or the course has no free seat.
        """
        waitlist = self._waitlists.get(course.course_id)
        if not waitlist:
            return None
        if not self._seat_allocator.has_available_seats(course):
            return None
        return waitlist.popleft()

    def position(self, student_id: str, course_id: str) -> int:
        """1-based position in FIFO order, or ``NOT_ON_WAITLIST``."""
        for index, queued_id in enumerate(self._waitlists.get(course_id, ()), start=1):
            if queued_id == student_id:
                return index
        return NOT_ON_WAITLIST

    def size(self, course_id: str) -> int:
        return len(self._waitlists.get(course_id, ()))

    def is_full(self, course: Course) -> bool:
        return self.size(course.course_id) >= course.waitlist_capacity

    def has_space(self, course: Course) -> bool:
        return self.size(course.course_id) < course.waitlist_capacity

    def contains(self, student_id: str, course_id: str) -> bool:
        return student_id in self._waitlists.get(course_id, ())

    def list_all(self, course_id: str) -> list[str]:
        """Snapshot of the queue in FIFO order."""
        return list(self._waitlists.get(course_id, ()))

    def clear(self, course_id: str) -> None:
        waitlist = self._waitlists.get(course_id)
        if waitlist is not None:
            waitlist.clear()

    def reinsert(self, student_id: str, course_id: str, index: int = 0) -> None:
        """Put a student back at a 0-based index, ignoring waitlist capacity.

        Undoes a removal or promotion that was never committed.
        """
        waitlist = self._waitlists.setdefault(course_id, deque())
        if student_id not in waitlist:
            waitlist.insert(index, student_id)

    def restore(self, course_id: str, student_ids: Iterable[str]) -> None:
        """Replace a course's queue with ``student_ids`` in the given order."""
        self._waitlists[course_id] = deque(dict.fromkeys(student_ids))
