from __future__ import annotations

import logging

from fastapi import APIRouter

logger = logging.getLogger("intakeoff")

router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.get("")
def list_patients():
    """Return the patient collection; storage is not wired up yet."""
    logger.debug("Listing patients (no storage configured)")
    return {
        "patients": [],
        "message": "Patient data will be implemented here",
    }
