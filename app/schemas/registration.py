# app/schemas/registration.py
from pydantic import BaseModel
from typing import Literal, Optional
from app.config import settings

OccupantType = Literal["tenant", "guest"]
VehicleSlot = Literal["primary", "secondary"]
RegistrationStatus = Literal["approved", "parked", "completed"]


class RegistrationCandidate(BaseModel):
    """Raw form submission. Required text fields are checked by slot_validator, not here."""
    occupant_name: Optional[str] = ""
    occupant_type: OccupantType = "tenant"
    email: Optional[str] = ""
    phone: Optional[str] = ""
    vehicle_slot: VehicleSlot = "primary"
    vehicle_plate: Optional[str] = ""
    vehicle_make: Optional[str] = ""
    vehicle_color: Optional[str] = ""
    hours_approved: int = settings.DEFAULT_HOURS_APPROVED
    notes: Optional[str] = None


class RegistrationOut(BaseModel):
    id: str
    created_at: str
    occupant_name: str
    occupant_type: OccupantType
    email: str
    phone: str
    vehicle_slot: VehicleSlot
    vehicle_plate: str
    vehicle_make: str
    vehicle_color: str
    hours_approved: int
    notes: Optional[str]
    status: RegistrationStatus
    notified_at: str
    available_actions: list[RegistrationStatus] = []

    class Config:
        from_attributes = True


class StatusUpdate(BaseModel):
    status: RegistrationStatus


class StatusUpdateOut(BaseModel):
    id: str
    updated: bool
    status: Optional[RegistrationStatus] = None


class RejectionOut(BaseModel):
    reason: str
    slot: Optional[VehicleSlot] = None
    detail: str
    candidate: RegistrationCandidate
