"""Registrar - course registration with seats, waitlists and requirements."""

__version__ = "0.1.0"
