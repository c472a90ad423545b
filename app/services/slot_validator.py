# app/services/slot_validator.py
"""
Slot assignment rules for new parking registrations.

validate() checks a raw candidate against every existing registration and
either builds a ready-to-store Registration or returns the first rule it
breaks. Checks run in a fixed order and the first failure wins:

  1. occupant name present          -> MissingName
  2. email present                  -> MissingEmail
  3. phone present                  -> MissingPhone
  4. vehicle plate present          -> MissingPlate
  5. hours_approved > 0             -> InvalidHours
  6. slot not already used by email -> SlotAlreadyUsed(slot)
  7. fewer than two vehicles        -> AccountVehicleLimitReached
  8. primary before secondary       -> PrimaryVehicleRequiredFirst

Slot and account limits count every registration for the email, completed
ones included.

Nothing here raises or touches the database. The clock and id generator are
passed in.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional

from app.models.registration import Registration, APPROVED, PRIMARY, SECONDARY
from app.schemas.registration import RegistrationCandidate
from app.utils.timestamps import new_id, to_iso, utc_now

SLOT_LABELS = {PRIMARY: "primary vehicle", SECONDARY: "second vehicle"}
MAX_VEHICLES_PER_ACCOUNT = 2


class RejectionKind(str, Enum):
    MISSING_NAME = "MissingName"
    MISSING_EMAIL = "MissingEmail"
    MISSING_PHONE = "MissingPhone"
    MISSING_PLATE = "MissingPlate"
    INVALID_HOURS = "InvalidHours"
    SLOT_ALREADY_USED = "SlotAlreadyUsed"
    ACCOUNT_VEHICLE_LIMIT_REACHED = "AccountVehicleLimitReached"
    PRIMARY_VEHICLE_REQUIRED_FIRST = "PrimaryVehicleRequiredFirst"


_MESSAGES = {
    RejectionKind.MISSING_NAME: "Please provide the tenant or guest name.",
    RejectionKind.MISSING_EMAIL: "Email is required to deliver confirmations.",
    RejectionKind.MISSING_PHONE: "Phone number is required to deliver SMS confirmations.",
    RejectionKind.MISSING_PLATE: "Vehicle plate number is required.",
    RejectionKind.INVALID_HOURS: "Approved parking hours must be at least 1 hour.",
    RejectionKind.ACCOUNT_VEHICLE_LIMIT_REACHED: (
        "This account already has two vehicles assigned. "
        "Remove a vehicle before registering a new one."
    ),
    RejectionKind.PRIMARY_VEHICLE_REQUIRED_FIRST: (
        "Register the primary vehicle first before assigning a second vehicle."
    ),
}


@dataclass(frozen=True)
class Rejection:
    kind: RejectionKind
    slot: Optional[str] = None    # only set for SlotAlreadyUsed

    @property
    def message(self) -> str:
        if self.kind is RejectionKind.SLOT_ALREADY_USED:
            return (
                f"The {SLOT_LABELS.get(self.slot, self.slot)} slot is already registered "
                "for this account. Update the existing record or select another slot."
            )
        return _MESSAGES[self.kind]


@dataclass(frozen=True)
class ValidationResult:
    registration: Optional[Registration] = None
    rejection: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def normalize_email(email: Optional[str]) -> str:
    return _clean(email).lower()


def _reject(kind: RejectionKind, slot: Optional[str] = None) -> ValidationResult:
    return ValidationResult(rejection=Rejection(kind=kind, slot=slot))


def validate(
    candidate: RegistrationCandidate,
    existing_registrations: Iterable[Registration],
    clock: Callable[[], datetime] = utc_now,
    id_factory: Callable[[], str] = new_id,
) -> ValidationResult:
    name = _clean(candidate.occupant_name)
    email = normalize_email(candidate.email)
    phone = _clean(candidate.phone)
    plate = _clean(candidate.vehicle_plate)

    if not name:
        return _reject(RejectionKind.MISSING_NAME)
    if not email:
        return _reject(RejectionKind.MISSING_EMAIL)
    if not phone:
        return _reject(RejectionKind.MISSING_PHONE)
    if not plate:
        return _reject(RejectionKind.MISSING_PLATE)
    if candidate.hours_approved <= 0:
        return _reject(RejectionKind.INVALID_HOURS)

    existing = [r for r in existing_registrations if r.email == email]

    if any(r.vehicle_slot == candidate.vehicle_slot for r in existing):
        return _reject(RejectionKind.SLOT_ALREADY_USED, slot=candidate.vehicle_slot)
    if len(existing) >= MAX_VEHICLES_PER_ACCOUNT:
        return _reject(RejectionKind.ACCOUNT_VEHICLE_LIMIT_REACHED)
    if not existing and candidate.vehicle_slot == SECONDARY:
        return _reject(RejectionKind.PRIMARY_VEHICLE_REQUIRED_FIRST)

    now = to_iso(clock())
    registration = Registration(
        id=id_factory(),
        created_at=now,
        occupant_name=name,
        occupant_type=candidate.occupant_type,
        email=email,
        phone=phone,
        vehicle_slot=candidate.vehicle_slot,
        vehicle_plate=plate.upper(),
        vehicle_make=_clean(candidate.vehicle_make),
        vehicle_color=_clean(candidate.vehicle_color),
        hours_approved=candidate.hours_approved,
        notes=_clean(candidate.notes) or None,
        status=APPROVED,
        notified_at=now,
    )
    return ValidationResult(registration=registration)
