"""Orchestrator package - registration state machine management."""

from registrar.orchestrator.cascade import StudentRemoval
from registrar.orchestrator.checkpoint import Checkpoint
from registrar.orchestrator.models import RegistrationResult
from registrar.orchestrator.registrar import ALREADY_ENROLLED, WAITLIST_FULL, Registrar

__all__ = [
    "ALREADY_ENROLLED",
    "WAITLIST_FULL",
    "Checkpoint",
    "Registrar",
    "RegistrationResult",
    "StudentRemoval",
]
