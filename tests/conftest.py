"""Shared pytest fixtures and configuration."""

from collections.abc import Generator

import pytest

from registrar.container import build_registrar
from registrar.orchestrator import Registrar
from registrar.state_store import Course, StateStore, Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def state_store() -> Generator[StateStore, None, None]:
    """In-memory StateStore, closed after the test."""
    store = StateStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def registrar(state_store: StateStore) -> Registrar:
    """Registrar wired over the in-memory store with no credit cap."""
    return build_registrar(state_store)


@pytest.fixture
def make_student(state_store: StateStore):
    """Factory that saves a student and returns it."""

    def _make(student_id: str, **kwargs) -> Student:
        kwargs.setdefault("name", f"Student {student_id}")
        return state_store.students.save(Student(student_id=student_id, **kwargs))

    return _make


@pytest.fixture
def make_course(state_store: StateStore):
    """Factory that saves a course and returns it."""

    def _make(course_id: str, **kwargs) -> Course:
        kwargs.setdefault("course_name", f"Course {course_id}")
        kwargs.setdefault("credits", 3)
        return state_store.courses.save(Course(course_id=course_id, **kwargs))

    return _make
