"""Typed client for the IntakeOff HTTP API."""

from .client import IntakeOffClient  # noqa: F401
from .models import Address, Patient, PatientCreate, PatientUpdate  # noqa: F401

__all__ = ["IntakeOffClient", "Address", "Patient", "PatientCreate", "PatientUpdate"]
