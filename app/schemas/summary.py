# app/schemas/summary.py
from pydantic import BaseModel


class SummaryOut(BaseModel):
    active: int
    tenants: int
    guests: int
    total_hours: int
