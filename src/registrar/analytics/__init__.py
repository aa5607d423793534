"""Analytics package - reporting aggregates over stored registrations."""

from registrar.analytics.statistics import EnrollmentStatistics, extract_department

__all__ = ["EnrollmentStatistics", "extract_department"]
