# app/routers/summary.py
"""Dashboard tiles: active vehicles, tenants, guests, hours authorized."""

from dataclasses import asdict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import exclusive, get_db
from app.schemas.summary import SummaryOut
from app.services.registration_store import all_registrations
from app.services.summary_service import summarize

router = APIRouter()


@router.get("/summary", response_model=SummaryOut, summary="Active registration totals")
def get_summary(db: Session = Depends(get_db)):
    with exclusive(db):
        return SummaryOut(**asdict(summarize(all_registrations(db))))
