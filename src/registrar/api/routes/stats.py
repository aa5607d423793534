"""Reporting endpoints."""

from fastapi import APIRouter, Query

from registrar.api.dependencies import StatisticsDep
from registrar.api.models import (
    APIResponse,
    CourseResponse,
    FillRateResponse,
    OverviewResponse,
    course_to_response,
)
from registrar.state_store import CourseNotFoundError

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/overview", response_model=APIResponse[OverviewResponse])
def get_overview(stats: StatisticsDep) -> APIResponse[OverviewResponse]:
    """System-wide enrollment aggregates."""
    return APIResponse(
        data=OverviewResponse(
            total_capacity=stats.total_system_capacity(),
            total_enrolled=stats.total_enrolled_students(),
            utilization_rate=stats.system_utilization_rate(),
            average_enrollment_per_course=stats.average_enrollment_per_course(),
            active_enrollments=stats.total_active_enrollments(),
            waitlisted_students=stats.total_waitlisted_students(),
            enrollment_by_department=stats.enrollment_by_department(),
            courses_by_enrollment_level=stats.courses_by_enrollment_level(),
        )
    )


@router.get("/courses/{course_id}/fill-rate", response_model=APIResponse[FillRateResponse])
def get_fill_rate(course_id: str, stats: StatisticsDep) -> APIResponse[FillRateResponse]:
    """Fill rate of one course."""
    fill_rate = stats.fill_rate(course_id)
    if fill_rate is None:
        raise CourseNotFoundError(f"Course with id '{course_id}' not found")
    return APIResponse(data=FillRateResponse(course_id=course_id, fill_rate=fill_rate))


@router.get("/popular", response_model=APIResponse[list[CourseResponse]])
def get_popular_courses(
    stats: StatisticsDep, top_n: int = Query(default=5, ge=0, le=100)
) -> APIResponse[list[CourseResponse]]:
    """Courses with the most enrolled students."""
    courses = stats.most_popular_courses(top_n)
    return APIResponse(data=[course_to_response(c) for c in courses])


@router.get("/full", response_model=APIResponse[list[CourseResponse]])
def get_full_courses(stats: StatisticsDep) -> APIResponse[list[CourseResponse]]:
    """Courses with no free seats."""
    return APIResponse(data=[course_to_response(c) for c in stats.full_courses()])
