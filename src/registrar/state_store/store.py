"""Entity stores backed by the State Store database."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Generic, TypeVar

from sqlalchemy import delete, func, select

from registrar.state_store.database import Database
from registrar.state_store.exceptions import (
    CourseExistsError,
    CourseNotFoundError,
    EnrollmentNotFoundError,
    StateStoreError,
    StudentExistsError,
    StudentNotFoundError,
)
from registrar.state_store.models import Course, Enrollment, EnrollmentStatus, Student

if TYPE_CHECKING:
    from sqlalchemy.orm import InstrumentedAttribute

ModelT = TypeVar("ModelT", Course, Student, Enrollment)

ENROLLMENT_ID_PREFIX = "ENR"
ENROLLMENT_ID_WIDTH = 6


class _EntityStore(Generic[ModelT]):
    """Shared CRUD for one table keyed by a string primary key.

    Every call opens its own session and returns detached instances, so
    callers mutate plain objects and hand them back to ``save``.
    """

    model: type[ModelT]
    label: str
    not_found_error: type[StateStoreError]
    exists_error: type[StateStoreError] = StateStoreError

    def __init__(self, db: Database) -> None:
        self._db = db

    @property
    def _key(self) -> InstrumentedAttribute[str]:
        raise NotImplementedError

    def _key_of(self, entity: ModelT) -> str:
        return getattr(entity, self._key.key)

    def save(self, entity: ModelT) -> ModelT:
        """Insert or update an entity by primary key.

        Returns:
            The same entity instance that was passed in.
        """
        session = self._db.get_session()
        try:
            session.merge(entity)
            session.commit()
            return entity
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create(self, entity: ModelT) -> ModelT:
        """Insert a new entity, refusing to overwrite an existing one.

        Raises:
            StateStoreError: The store's *exists* error if the key is taken.
        """
        key = self._key_of(entity)
        if self.exists(key):
            raise self.exists_error(f"{self.label} with id '{key}' already exists")
        return self.save(entity)

    def find_by_id(self, entity_id: str) -> ModelT | None:
        session = self._db.get_session()
        try:
            return session.get(self.model, entity_id)
        finally:
            session.close()

    def get(self, entity_id: str) -> ModelT:
        """Get an entity by ID.

        Raises:
            StateStoreError: The store's *not found* error if absent.
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            raise self.not_found_error(f"{self.label} with id '{entity_id}' not found")
        return entity

    def find_all(self) -> list[ModelT]:
        return self._select()

    def exists(self, entity_id: str) -> bool:
        return self.find_by_id(entity_id) is not None

    def delete(self, entity_id: str) -> bool:
        session = self._db.get_session()
        try:
            entity = session.get(self.model, entity_id)
            if entity is None:
                return False
            session.delete(entity)
            session.commit()
            return True
        finally:
            session.close()

    def count(self) -> int:
        session = self._db.get_session()
        try:
            return session.execute(select(func.count()).select_from(self.model)).scalar_one()
        finally:
            session.close()

    def clear(self) -> None:
        session = self._db.get_session()
        try:
            session.execute(delete(self.model))
            session.commit()
        finally:
            session.close()

    def _select(self, *conditions: object) -> list[ModelT]:
        session = self._db.get_session()
        try:
            stmt = select(self.model).where(*conditions).order_by(self._key)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()


class StudentStore(_EntityStore[Student]):
    """Student lookup table.

    ``delete`` removes the student row only; cascading over enrollments and
    waitlists is the orchestrator's job (``Registrar.remove_student``).
    """

    model = Student
    label = "Student"
    not_found_error = StudentNotFoundError
    exists_error = StudentExistsError

    @property
    def _key(self) -> InstrumentedAttribute[str]:
        return Student.student_id


class CourseStore(_EntityStore[Course]):
    """Course lookup table."""

    model = Course
    label = "Course"
    not_found_error = CourseNotFoundError
    exists_error = CourseExistsError

    @property
    def _key(self) -> InstrumentedAttribute[str]:
        return Course.course_id

    def find_with_available_seats(self) -> list[Course]:
        """Courses whose enrolled count is below capacity."""
        return self._select(Course.enrolled < Course.capacity)


class EnrollmentStore(_EntityStore[Enrollment]):
    """Enrollment table with student/course queries.

    Enrollment IDs come from a per-process sequence (``ENR000001``,
    ``ENR000002``, ...) seeded past any IDs already in the database.
    """

    model = Enrollment
    label = "Enrollment"
    not_found_error = EnrollmentNotFoundError

    def __init__(self, db: Database) -> None:
        super().__init__(db)
        self._sequence = itertools.count(self._highest_sequence() + 1)

    @property
    def _key(self) -> InstrumentedAttribute[str]:
        return Enrollment.enrollment_id

    def save(self, enrollment: Enrollment) -> Enrollment:
        """Insert or update an enrollment, assigning the next ID when missing."""
        if not enrollment.enrollment_id:
            enrollment.enrollment_id = self._next_id()
        return super().save(enrollment)

    def clear(self) -> None:
        """Delete all enrollments and restart the ID sequence."""
        super().clear()
        self._sequence = itertools.count(1)

    def find_by_student(self, student_id: str) -> list[Enrollment]:
        return self._select(Enrollment.student_id == student_id)

    def find_by_course(self, course_id: str) -> list[Enrollment]:
        return self._select(Enrollment.course_id == course_id)

    def find_active_by_student(self, student_id: str) -> list[Enrollment]:
        return self._select(
            Enrollment.student_id == student_id,
            Enrollment.status == EnrollmentStatus.ENROLLED.value,
        )

    def find_by_student_and_course(self, student_id: str, course_id: str) -> Enrollment | None:
        """First non-dropped enrollment for the pair, or None."""
        matches = self._select(
            Enrollment.student_id == student_id,
            Enrollment.course_id == course_id,
            Enrollment.status != EnrollmentStatus.DROPPED.value,
        )
        return matches[0] if matches else None

    def is_student_enrolled(self, student_id: str, course_id: str) -> bool:
        return bool(
            self._select(
                Enrollment.student_id == student_id,
                Enrollment.course_id == course_id,
                Enrollment.status == EnrollmentStatus.ENROLLED.value,
            )
        )

    def count_by_course_and_status(self, course_id: str, status: EnrollmentStatus) -> int:
        return len(
            self._select(
                Enrollment.course_id == course_id,
                Enrollment.status == EnrollmentStatus(status).value,
            )
        )

    def _next_id(self) -> str:
        return f"{ENROLLMENT_ID_PREFIX}{next(self._sequence):0{ENROLLMENT_ID_WIDTH}d}"

    def _highest_sequence(self) -> int:
        session = self._db.get_session()
        try:
            ids = session.execute(select(Enrollment.enrollment_id)).scalars().all()
        finally:
            session.close()
        highest = 0
        for enrollment_id in ids:
            suffix = enrollment_id[len(ENROLLMENT_ID_PREFIX) :]
            if enrollment_id.startswith(ENROLLMENT_ID_PREFIX) and suffix.isdigit():
                highest = max(highest, int(suffix))
        return highest


class StateStore:
    """Owns the database and the three entity stores built on it."""

    def __init__(self, db_path: str = ":memory:") -> None:
        """Initialize State Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()
        self.students = StudentStore(self._db)
        self.courses = CourseStore(self._db)
        self.enrollments = EnrollmentStore(self._db)

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()
