# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import exclusive, get_db
from app.utils.timestamps import to_iso, utc_now

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    result = {
        "status": "ok",
        "timestamp": to_iso(utc_now()),
        "backend": "ok",
        "database": "unknown",
    }

    with exclusive(db):
        try:
            db.execute(text("SELECT 1"))
            result["database"] = "ok"
        except Exception as e:
            result["database"] = f"error: {str(e)}"
            result["status"] = "degraded"

    return result
