"""Result values returned by the registration engines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AllocationResult:
    """Outcome of a seat allocation attempt.

    Attributes:
        allocated: A seat was taken and the enrolled count incremented.
        waitlisted: The course is full; the caller should try the waitlist.
        message: Human-readable description.
    """

    allocated: bool
    waitlisted: bool
    message: str

    @classmethod
    def success(cls) -> AllocationResult:
        return cls(allocated=True, waitlisted=False, message="Seat allocated successfully")

    @classmethod
    def full(cls) -> AllocationResult:
        return cls(
            allocated=False,
            waitlisted=True,
            message="No seats available - added to waitlist",
        )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a requirement or eligibility check.

    Attributes:
        valid: Whether the check passed.
        message: Reason for the outcome; on failure names the first
            offending requirement.
    """

    valid: bool
    message: str

    @classmethod
    def success(cls, message: str = "Validation successful") -> ValidationResult:
        return cls(valid=True, message=message)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(valid=False, message=message)
