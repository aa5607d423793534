"""Course endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import RegistrarDep, StateStoreDep
from registrar.api.models import (
    APIResponse,
    CourseCreate,
    CourseResponse,
    EnrollmentResponse,
    SeatsResponse,
    WaitlistResponse,
    course_to_response,
    enrollment_to_response,
)
from registrar.state_store import Course

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=APIResponse[list[CourseResponse]])
def list_courses(store: StateStoreDep) -> APIResponse[list[CourseResponse]]:
    """List all courses."""
    courses = store.courses.find_all()
    return APIResponse(data=[course_to_response(c) for c in courses])


@router.post(
    "",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_course(course: CourseCreate, store: StateStoreDep) -> APIResponse[CourseResponse]:
    """Create a new course with no seats taken."""
    created = store.courses.create(
        Course(
            course_id=course.course_id,
            course_name=course.course_name,
            credits=course.credits,
            capacity=course.capacity,
            waitlist_capacity=course.waitlist_capacity,
            prerequisites=course.prerequisites,
            corequisites=course.corequisites,
        )
    )
    return APIResponse(data=course_to_response(created))


@router.get("/{course_id}", response_model=APIResponse[CourseResponse])
def get_course(course_id: str, store: StateStoreDep) -> APIResponse[CourseResponse]:
    """Get a course by ID."""
    course = store.courses.get(course_id)
    return APIResponse(data=course_to_response(course))


@router.get(
    "/{course_id}/enrollments",
    response_model=APIResponse[list[EnrollmentResponse]],
)
def list_course_enrollments(
    course_id: str, store: StateStoreDep, registrar: RegistrarDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List every enrollment in a course."""
    store.courses.get(course_id)
    enrollments = registrar.get_course_enrollments(course_id)
    return APIResponse(data=[enrollment_to_response(e) for e in enrollments])


@router.get("/{course_id}/waitlist", response_model=APIResponse[WaitlistResponse])
def get_waitlist(
    course_id: str, store: StateStoreDep, registrar: RegistrarDep
) -> APIResponse[WaitlistResponse]:
    """Get the course's waitlist in promotion order."""
    store.courses.get(course_id)
    students = registrar.waitlist_manager.list_all(course_id)
    return APIResponse(data=WaitlistResponse(course_id=course_id, students=students))


@router.get("/{course_id}/seats", response_model=APIResponse[SeatsResponse])
def get_seats(
    course_id: str, store: StateStoreDep, registrar: RegistrarDep
) -> APIResponse[SeatsResponse]:
    """Get seat and waitlist availability for a course."""
    course = store.courses.get(course_id)
    allocator = registrar.seat_allocator
    return APIResponse(
        data=SeatsResponse(
            course_id=course.course_id,
            capacity=course.capacity,
            enrolled=course.enrolled,
            available=allocator.available_seats(course),
            utilization=allocator.utilization(course),
            waitlist_size=registrar.waitlist_manager.size(course_id),
            waitlist_capacity=course.waitlist_capacity,
        )
    )
