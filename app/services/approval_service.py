# app/services/approval_service.py
"""
Approval workflow for one form submission:
  validate against all registrations → store → dispatch confirmation.
The registration and its confirmation are committed together.
A rejected candidate, or a failed dispatch, changes nothing.
"""

from datetime import datetime
from typing import Callable
from sqlalchemy.orm import Session
from app.schemas.registration import RegistrationCandidate
from app.services.slot_validator import ValidationResult, validate
from app.services.registration_store import all_registrations, create_registration
from app.services.notification_service import record_approval
from app.utils.logger import get_logger
from app.utils.timestamps import new_id, utc_now

logger = get_logger(__name__)


async def approve_registration(
    db: Session,
    candidate: RegistrationCandidate,
    clock: Callable[[], datetime] = utc_now,
    id_factory: Callable[[], str] = new_id,
) -> ValidationResult:
    result = validate(candidate, all_registrations(db), clock=clock, id_factory=id_factory)
    if not result.accepted:
        logger.info(f"Registration rejected: {result.rejection.kind.value} | {result.rejection.message}")
        return result

    try:
        registration = create_registration(db, result.registration, commit=False)
        await record_approval(db, registration, id_factory=id_factory, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"Approval for {result.registration.vehicle_plate} rolled back", exc_info=True)
        raise
    return result
