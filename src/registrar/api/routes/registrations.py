"""Registration workflow endpoints."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from registrar.api.dependencies import RegistrarDep, StateStoreDep
from registrar.api.models import (
    APIResponse,
    DropResponse,
    EligibilityResponse,
    RegistrationRequest,
    RegistrationResponse,
    WaitlistPositionResponse,
)
from registrar.engine import NOT_ON_WAITLIST
from registrar.state_store import EnrollmentNotFoundError

router = APIRouter(prefix="/registrations", tags=["registrations"])


@router.post(
    "",
    response_model=APIResponse[RegistrationResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    request: RegistrationRequest, store: StateStoreDep, registrar: RegistrarDep
) -> APIResponse[RegistrationResponse] | JSONResponse:
    """Register a student for a course (enrolled or waitlisted)."""
    # Unknown IDs surface as 404 through the store's not-found errors
    store.students.get(request.student_id)
    store.courses.get(request.course_id)

    result = registrar.register(request.student_id, request.course_id)
    if not result.success or result.enrollment_id is None or result.status is None:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=APIResponse[None](data=None, error=result.message).model_dump(),
        )

    return APIResponse(
        data=RegistrationResponse(
            enrollment_id=result.enrollment_id,
            status=result.status.value,
            message=result.message,
        )
    )


@router.post("/drop", response_model=APIResponse[DropResponse])
def drop(request: RegistrationRequest, registrar: RegistrarDep) -> APIResponse[DropResponse]:
    """Drop a student's active registration."""
    if not registrar.drop(request.student_id, request.course_id):
        raise EnrollmentNotFoundError(
            f"No active enrollment for student '{request.student_id}' "
            f"in course '{request.course_id}'"
        )
    return APIResponse(data=DropResponse(dropped=True))


@router.get("/eligibility", response_model=APIResponse[EligibilityResponse])
def check_eligibility(
    student_id: str, course_id: str, registrar: RegistrarDep
) -> APIResponse[EligibilityResponse]:
    """Check whether a registration would pass its gates."""
    result = registrar.check_eligibility(student_id, course_id)
    return APIResponse(data=EligibilityResponse(valid=result.valid, message=result.message))


@router.get("/waitlist-position", response_model=APIResponse[WaitlistPositionResponse])
def get_waitlist_position(
    student_id: str, course_id: str, registrar: RegistrarDep
) -> APIResponse[WaitlistPositionResponse]:
    """Get a student's 1-based waitlist position."""
    position = registrar.get_waitlist_position(student_id, course_id)
    return APIResponse(
        data=WaitlistPositionResponse(
            student_id=student_id,
            course_id=course_id,
            position=None if position == NOT_ON_WAITLIST else position,
        )
    )
