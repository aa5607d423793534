"""Engine package - seat, waitlist and requirement logic."""

from registrar.engine.models import AllocationResult, ValidationResult
from registrar.engine.prerequisites import PrerequisiteEngine
from registrar.engine.seat_allocator import SeatAllocator
from registrar.engine.waitlist import NOT_ON_WAITLIST, WaitlistManager

__all__ = [
    "NOT_ON_WAITLIST",
    "AllocationResult",
    "PrerequisiteEngine",
    "SeatAllocator",
    "ValidationResult",
    "WaitlistManager",
]
