"""Student endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import RegistrarDep, StateStoreDep
from registrar.api.models import (
    APIResponse,
    CompletedCourseAdd,
    EnrollmentResponse,
    StudentCreate,
    StudentResponse,
    enrollment_to_response,
    student_to_response,
)
from registrar.state_store import Student, StudentNotFoundError

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=APIResponse[list[StudentResponse]])
def list_students(store: StateStoreDep) -> APIResponse[list[StudentResponse]]:
    """List all students."""
    students = store.students.find_all()
    return APIResponse(data=[student_to_response(s) for s in students])


@router.post(
    "",
    response_model=APIResponse[StudentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentCreate, store: StateStoreDep) -> APIResponse[StudentResponse]:
    """Create a new student."""
    created = store.students.create(
        Student(
            student_id=student.student_id,
            name=student.name,
            program=student.program,
            semester=student.semester,
            completed_courses=student.completed_courses,
            current_credits=student.current_credits,
        )
    )
    return APIResponse(data=student_to_response(created))


@router.get("/{student_id}", response_model=APIResponse[StudentResponse])
def get_student(student_id: str, store: StateStoreDep) -> APIResponse[StudentResponse]:
    """Get a student by ID."""
    student = store.students.get(student_id)
    return APIResponse(data=student_to_response(student))


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(student_id: str, registrar: RegistrarDep) -> None:
    """Delete a student, cascading over enrollments and waitlists."""
    if not registrar.remove_student(student_id):
        raise StudentNotFoundError(f"Student with id '{student_id}' not found")


@router.get(
    "/{student_id}/enrollments",
    response_model=APIResponse[list[EnrollmentResponse]],
)
def list_student_enrollments(
    student_id: str, store: StateStoreDep, registrar: RegistrarDep
) -> APIResponse[list[EnrollmentResponse]]:
    """List every enrollment of a student, including dropped ones."""
    store.students.get(student_id)
    enrollments = registrar.get_student_enrollments(student_id)
    return APIResponse(data=[enrollment_to_response(e) for e in enrollments])


@router.post(
    "/{student_id}/completed-courses",
    response_model=APIResponse[StudentResponse],
)
def add_completed_course(
    student_id: str, body: CompletedCourseAdd, store: StateStoreDep
) -> APIResponse[StudentResponse]:
    """Record a course the student has completed."""
    student = store.students.get(student_id)
    student.add_completed_course(body.course_id)
    store.students.save(student)
    return APIResponse(data=student_to_response(student))
