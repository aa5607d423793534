"""Startup wiring: stores, then engines, then the orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.engine import PrerequisiteEngine, SeatAllocator, WaitlistManager
from registrar.orchestrator import Registrar

if TYPE_CHECKING:
    from registrar.state_store import StateStore


def build_registrar(state_store: StateStore, max_credits: int | None = None) -> Registrar:
    """Assemble a Registrar over an opened StateStore.

    Args:
        state_store: Provides the student, course and enrollment stores.
        max_credits: Optional credit-load ceiling for registrations.

    Returns:
        A Registrar whose waitlists are rebuilt from the stored enrollments.
    """
    seat_allocator = SeatAllocator()
    waitlist_manager = WaitlistManager(seat_allocator)
    prerequisite_engine = PrerequisiteEngine()

    registrar = Registrar(
        students=state_store.students,
        courses=state_store.courses,
        enrollments=state_store.enrollments,
        prerequisite_engine=prerequisite_engine,
        seat_allocator=seat_allocator,
        waitlist_manager=waitlist_manager,
        max_credits=max_credits,
    )
    registrar.restore_waitlists()
    return registrar
