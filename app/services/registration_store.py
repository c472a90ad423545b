# app/services/registration_store.py
"""
Registration storage helpers.
Used by approval_service and the registrations router.

The store never re-validates: slot rules live in slot_validator.
Status changes are permissive unless enforce_transitions is set
(settings.ENFORCE_STATUS_TRANSITIONS at the router level).
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.models.registration import Registration, APPROVED, PARKED, COMPLETED
from app.services.slot_validator import normalize_email
from app.utils.logger import get_logger

logger = get_logger(__name__)

FORWARD_TRANSITIONS = {
    APPROVED: (PARKED, COMPLETED),
    PARKED: (COMPLETED,),
    COMPLETED: (),
}


class InvalidStatusTransition(Exception):
    def __init__(self, registration_id: str, current: str, requested: str):
        self.registration_id = registration_id
        self.current = current
        self.requested = requested
        super().__init__(f"Registration {registration_id} cannot move from {current} to {requested}")


def allowed_transitions(status: str) -> tuple:
    """Statuses reachable from `status` on the forward-only lifecycle."""
    return FORWARD_TRANSITIONS.get(status, ())


def create_registration(db: Session, registration: Registration, commit: bool = True) -> Registration:
    """Append a validated registration. With commit=False it is only flushed into the caller's unit of work."""
    db.add(registration)
    if commit:
        db.commit()
    else:
        db.flush()
    logger.info(
        f"Registration {registration.id} stored: {registration.vehicle_plate} "
        f"({registration.vehicle_slot}) for {registration.email}"
    )
    return registration


def get_registration(db: Session, registration_id: str) -> Optional[Registration]:
    """Find a registration by id. Returns None if not found."""
    return db.query(Registration).filter(Registration.id == registration_id).first()


def update_status(db: Session, registration_id: str, new_status: str,
                  enforce_transitions: bool = False) -> Optional[Registration]:
    """
    Replace the status of one registration, leaving every other field alone.
    Unknown ids are a silent no-op and return None.
    """
    registration = get_registration(db, registration_id)
    if registration is None:
        logger.debug(f"Status update for unknown registration {registration_id} ignored")
        return None

    current = registration.status
    if enforce_transitions and new_status != current and new_status not in allowed_transitions(current):
        raise InvalidStatusTransition(registration_id, current, new_status)

    registration.status = new_status
    db.commit()
    logger.info(f"Registration {registration_id} status {current} → {new_status}")
    return registration


def all_registrations(db: Session) -> list[Registration]:
    """Every registration in insertion order."""
    return db.query(Registration).order_by(Registration.seq.asc()).all()


def list_registrations(db: Session, status: str = None, occupant_type: str = None) -> list[Registration]:
    """Registrations for display, latest first."""
    q = db.query(Registration)
    if status:
        q = q.filter(Registration.status == status)
    if occupant_type:
        q = q.filter(Registration.occupant_type == occupant_type)
    return q.order_by(Registration.created_at.desc(), Registration.seq.desc()).all()


def registrations_for_email(db: Session, email: str) -> list[Registration]:
    """All registrations on one account, in insertion order."""
    return (
        db.query(Registration)
        .filter(Registration.email == normalize_email(email))
        .order_by(Registration.seq.asc())
        .all()
    )
