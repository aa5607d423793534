"""Unit tests for EnrollmentStatistics."""

import pytest

from registrar.analytics import EnrollmentStatistics, extract_department
from registrar.state_store import Enrollment, EnrollmentStatus, StateStore


@pytest.fixture
def stats(state_store: StateStore, make_course) -> EnrollmentStatistics:
    """Statistics over four courses with known fill rates."""
    make_course("CS101", capacity=10, enrolled=10)  # 100%
    make_course("CS201", capacity=10, enrolled=4)  # 40%
    make_course("MATH101", capacity=20, enrolled=2)  # 10%
    make_course("101X", capacity=5, enrolled=0)  # 0%
    return EnrollmentStatistics(state_store.courses, state_store.enrollments)


@pytest.mark.unit
class TestExtractDepartment:
    """Tests for extract_department."""

    @pytest.mark.parametrize(
        ("course_id", "expected"),
        [
            ("CS101", "CS"),
            ("MATH2040", "MATH"),
            ("HIST", "HIST"),
            ("101X", "UNKNOWN"),
            ("", "UNKNOWN"),
            (None, "UNKNOWN"),
        ],
    )
    def test_extract_department(self, course_id: str | None, expected: str) -> None:
        assert extract_department(course_id) == expected


@pytest.mark.unit
class TestCourseAggregates:
    """Tests for course-level aggregates."""

    def test_fill_rate(self, stats: EnrollmentStatistics) -> None:
        assert stats.fill_rate("CS201") == 40.0
        assert stats.fill_rate("NOPE") is None

    def test_fill_rate_zero_capacity(
        self, stats: EnrollmentStatistics, make_course
    ) -> None:
        make_course("ART100", capacity=0)

        assert stats.fill_rate("ART100") == 0.0

    def test_most_popular_courses(self, stats: EnrollmentStatistics) -> None:
        top = stats.most_popular_courses(2)

        assert [c.course_id for c in top] == ["CS101", "CS201"]
        assert stats.most_popular_courses(0) == []

    def test_enrollment_by_department(self, stats: EnrollmentStatistics) -> None:
        assert stats.enrollment_by_department() == {"CS": 14, "MATH": 2, "UNKNOWN": 0}

    def test_courses_above_threshold(self, stats: EnrollmentStatistics) -> None:
        ids = {c.course_id for c in stats.courses_above_threshold(40)}

        assert ids == {"CS101", "CS201"}
        assert stats.courses_above_threshold(101) == []
        assert stats.courses_above_threshold(-1) == []

    def test_average_class_size(self, stats: EnrollmentStatistics) -> None:
        assert stats.average_class_size(2) == pytest.approx(16 / 3)
        assert stats.average_class_size(50) == 0.0
        assert stats.average_class_size(-1) == 0.0

    def test_full_courses(self, stats: EnrollmentStatistics) -> None:
        assert [c.course_id for c in stats.full_courses()] == ["CS101"]

    def test_courses_by_enrollment_level(self, stats: EnrollmentStatistics) -> None:
        assert stats.courses_by_enrollment_level() == {
            "empty": 1,
            "low": 1,
            "medium": 1,
            "high": 0,
            "full": 1,
        }


@pytest.mark.unit
class TestSystemAggregates:
    """Tests for system-wide totals."""

    def test_capacity_and_utilization(self, stats: EnrollmentStatistics) -> None:
        assert stats.total_system_capacity() == 45
        assert stats.total_enrolled_students() == 16
        assert stats.system_utilization_rate() == pytest.approx(16 * 100 / 45)
        assert stats.average_enrollment_per_course() == 4.0

    def test_empty_system(self, state_store: StateStore) -> None:
        empty = EnrollmentStatistics(state_store.courses, state_store.enrollments)

        assert empty.system_utilization_rate() == 0.0
        assert empty.average_enrollment_per_course() == 0.0

    def test_enrollment_counts_by_status(
        self, stats: EnrollmentStatistics, state_store: StateStore
    ) -> None:
        state_store.enrollments.save(Enrollment("S1", "CS101", EnrollmentStatus.ENROLLED))
        state_store.enrollments.save(Enrollment("S2", "CS101", EnrollmentStatus.WAITLISTED))
        state_store.enrollments.save(Enrollment("S3", "CS101", EnrollmentStatus.DROPPED))

        assert stats.total_active_enrollments() == 1
        assert stats.total_waitlisted_students() == 1
