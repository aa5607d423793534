"""Data models for the Orchestrator module."""

from __future__ import annotations

from dataclasses import dataclass

from registrar.state_store import EnrollmentStatus


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a registration attempt.

    Attributes:
        success: Whether an enrollment record was created.
        message: Human-readable outcome or failure reason.
        status: ENROLLED or WAITLISTED on success, None on failure.
        enrollment_id: ID of the created enrollment, None on failure.
    """

    success: bool
    message: str
    status: EnrollmentStatus | None = None
    enrollment_id: str | None = None

    @classmethod
    def registered(cls, enrollment_id: str, status: EnrollmentStatus) -> RegistrationResult:
        return cls(
            success=True,
            message="Registration successful",
            status=status,
            enrollment_id=enrollment_id,
        )

    @classmethod
    def failure(cls, message: str) -> RegistrationResult:
        return cls(success=False, message=message)
