# app/models/registration.py
"""
Parking registrations table.
One row per approved vehicle-to-slot assignment for a tenant or guest.
Rows are appended by registration_store and only ever have their status changed.
"""

from sqlalchemy import Column, Integer, String, Text
from app.database import Base

TENANT = "tenant"
GUEST = "guest"
OCCUPANT_TYPES = (TENANT, GUEST)

PRIMARY = "primary"
SECONDARY = "secondary"
VEHICLE_SLOTS = (PRIMARY, SECONDARY)

APPROVED = "approved"
PARKED = "parked"
COMPLETED = "completed"
STATUSES = (APPROVED, PARKED, COMPLETED)


class Registration(Base):
    __tablename__ = "registrations"

    seq = Column(Integer, primary_key=True, autoincrement=True)   # insertion order
    id = Column(String(64), unique=True, nullable=False, index=True)
    created_at = Column(String(32), nullable=False, index=True)  # ISO-8601 UTC
    occupant_name = Column(String(200), nullable=False)
    occupant_type = Column(String(20), nullable=False)            # tenant | guest
    email = Column(String(320), nullable=False, index=True)       # lower-cased
    phone = Column(String(50), nullable=False)
    vehicle_slot = Column(String(20), nullable=False)             # primary | secondary
    vehicle_plate = Column(String(50), nullable=False)            # upper-cased
    vehicle_make = Column(String(100), nullable=False, default="")
    vehicle_color = Column(String(50), nullable=False, default="")
    hours_approved = Column(Integer, nullable=False)
    notes = Column(Text)
    status = Column(String(20), nullable=False, default=APPROVED)  # approved | parked | completed
    notified_at = Column(String(32), nullable=False)

    def __repr__(self):
        return f"<Registration {self.id} plate={self.vehicle_plate} slot={self.vehicle_slot} status={self.status}>"
