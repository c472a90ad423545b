# app/routers/notifications.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.config import settings
from app.database import exclusive, get_db
from app.schemas.notification import NotificationOut
from app.services.notification_service import list_notifications

router = APIRouter()


@router.get("/notifications", response_model=list[NotificationOut], summary="Confirmation dispatch log")
def get_notifications(limit: int = Query(settings.NOTIFICATION_FEED_LIMIT, ge=0),
                      db: Session = Depends(get_db)):
    """Newest first."""
    with exclusive(db):
        return [NotificationOut.model_validate(n) for n in list_notifications(db, limit=limit)]
