"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from registrar.analytics import EnrollmentStatistics
from registrar.container import build_registrar
from registrar.orchestrator import Registrar
from registrar.state_store import StateStore

# Global StateStore instance (initialized on app startup)
_state_store: StateStore | None = None

# Global Registrar instance (initialized on app startup)
_registrar: Registrar | None = None


def init_state_store(db_path: str = ":memory:") -> StateStore:
    """Initialize the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    _state_store = StateStore(db_path)
    return _state_store


def close_state_store() -> None:
    """Close the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    if _state_store is not None:
        _state_store.close()
        _state_store = None


def get_state_store() -> Generator[StateStore, None, None]:
    """Dependency that provides the StateStore instance."""
    if _state_store is None:
        raise RuntimeError("StateStore not initialized. Call init_state_store() first.")
    yield _state_store


# Type alias for dependency injection
StateStoreDep = Annotated[StateStore, Depends(get_state_store)]


def init_registrar(state_store: StateStore, max_credits: int | None = None) -> Registrar:
    """Initialize the global Registrar over the given store."""
    global _registrar  # noqa: PLW0603
    _registrar = build_registrar(state_store, max_credits=max_credits)
    return _registrar


def close_registrar() -> None:
    """Drop the global Registrar instance."""
    global _registrar  # noqa: PLW0603
    _registrar = None


def get_registrar() -> Generator[Registrar, None, None]:
    """Dependency that provides the Registrar instance."""
    if _registrar is None:
        raise RuntimeError("Registrar not initialized. Call init_registrar() first.")
    yield _registrar


# Type alias for dependency injection
RegistrarDep = Annotated[Registrar, Depends(get_registrar)]


def get_statistics(store: StateStoreDep) -> EnrollmentStatistics:
    """Dependency that provides statistics over the current store."""
    return EnrollmentStatistics(store.courses, store.enrollments)


StatisticsDep = Annotated[EnrollmentStatistics, Depends(get_statistics)]
