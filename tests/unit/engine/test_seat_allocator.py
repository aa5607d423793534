"""Unit tests for SeatAllocator."""

import pytest

from registrar.engine import SeatAllocator
from registrar.state_store import Course


@pytest.fixture
def allocator() -> SeatAllocator:
    return SeatAllocator()


def course(capacity: int, enrolled: int = 0) -> Course:
    return Course(
        course_id="CS101", course_name="Intro", credits=3, capacity=capacity, enrolled=enrolled
    )


@pytest.mark.unit
class TestAllocate:
    """Tests for allocate."""

    def test_allocates_when_seat_free(self, allocator: SeatAllocator) -> None:
        """A free seat is taken and the counter incremented."""
        c = course(capacity=2)

        result = allocator.allocate(c)

        assert result.allocated is True
        assert result.waitlisted is False
        assert result.message == "Seat allocated successfully"
        assert c.enrolled == 1

    def test_full_course_reports_waitlist(self, allocator: SeatAllocator) -> None:
        """A full course is not modified and suggests the waitlist."""
        c = course(capacity=1, enrolled=1)

        result = allocator.allocate(c)

        assert result.allocated is False
        assert result.waitlisted is True
        assert result.message == "No seats available - added to waitlist"
        assert c.enrolled == 1

    def test_zero_capacity_never_allocates(self, allocator: SeatAllocator) -> None:
        """Capacity 0 is treated as full, not as an error."""
        c = course(capacity=0)

        result = allocator.allocate(c)

        assert result.allocated is False
        assert result.waitlisted is True
        assert c.enrolled == 0

    def test_allocations_stop_at_capacity(self, allocator: SeatAllocator) -> None:
        """Repeated allocation never pushes enrolled past capacity."""
        c = course(capacity=3)

        results = [allocator.allocate(c) for _ in range(5)]

        assert [r.allocated for r in results] == [True, True, True, False, False]
        assert c.enrolled == 3
        assert allocator.is_valid_allocation(c)


@pytest.mark.unit
class TestRelease:
    """Tests for release."""

    def test_release_decrements(self, allocator: SeatAllocator) -> None:
        c = course(capacity=2, enrolled=2)

        assert allocator.release(c) is True
        assert c.enrolled == 1

    def test_release_on_empty_course_is_noop(self, allocator: SeatAllocator) -> None:
        """Releasing with nobody enrolled returns False and stays at 0."""
        c = course(capacity=2)

        assert allocator.release(c) is False
        assert c.enrolled == 0


@pytest.mark.unit
class TestQueries:
    """Tests for the read-only capacity helpers."""

    def test_available_seats_clamped(self, allocator: SeatAllocator) -> None:
        """Over-capacity courses report 0 free seats."""
        assert allocator.available_seats(course(capacity=5, enrolled=2)) == 3
        assert allocator.available_seats(course(capacity=2, enrolled=4)) == 0

    def test_capacity_flags(self, allocator: SeatAllocator) -> None:
        c = course(capacity=2, enrolled=1)

        assert allocator.has_available_seats(c) is True
        assert allocator.is_at_capacity(c) is False
        assert allocator.has_one_seat_remaining(c) is True

        allocator.allocate(c)

        assert allocator.has_available_seats(c) is False
        assert allocator.is_at_capacity(c) is True
        assert allocator.has_one_seat_remaining(c) is False

    def test_utilization(self, allocator: SeatAllocator) -> None:
        assert allocator.utilization(course(capacity=4, enrolled=1)) == 25.0
        assert allocator.utilization(course(capacity=0)) == 0.0

    def test_is_valid_allocation(self, allocator: SeatAllocator) -> None:
        assert allocator.is_valid_allocation(course(capacity=2, enrolled=2)) is True
        assert allocator.is_valid_allocation(course(capacity=2, enrolled=3)) is False

    def test_can_accommodate_uses_raw_difference(self, allocator: SeatAllocator) -> None:
        """can_accommodate is not clamped, unlike available_seats."""
        assert allocator.can_accommodate(course(capacity=10, enrolled=7), 3) is True
        assert allocator.can_accommodate(course(capacity=10, enrolled=7), 4) is False
        over = course(capacity=2, enrolled=4)
        assert allocator.can_accommodate(over, -2) is True
        assert allocator.can_accommodate(over, 0) is False
