# app/services/summary_service.py
"""Dashboard totals. Recomputed from the full registration list on every call."""

from dataclasses import dataclass
from typing import Iterable
from app.models.registration import Registration, COMPLETED, TENANT, GUEST


@dataclass(frozen=True)
class Summary:
    active: int
    tenants: int
    guests: int
    total_hours: int


def summarize(registrations: Iterable[Registration]) -> Summary:
    active = [r for r in registrations if r.status != COMPLETED]
    return Summary(
        active=len(active),
        tenants=sum(1 for r in active if r.occupant_type == TENANT),
        guests=sum(1 for r in active if r.occupant_type == GUEST),
        total_hours=sum(r.hours_approved for r in active),
    )
