# app/services/notification_service.py
"""
Confirmation dispatch log.
Called by approval_service once per approved registration.
Delivery is simulated: the email + SMS send is only written to the log.
"""

from typing import Callable
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.models.notification import Notification
from app.models.registration import Registration
from app.utils.logger import get_logger
from app.utils.timestamps import new_id

logger = get_logger(__name__)


def format_headline(registration: Registration) -> str:
    return f"Parking slot approved for {registration.vehicle_plate}"


def format_details(registration: Registration) -> str:
    hours = registration.hours_approved
    unit = "hour" if hours == 1 else "hours"
    return f"Confirmation sent to {registration.email} and {registration.phone} for {hours} {unit}."


async def record_approval(db: Session, registration: Registration,
                          id_factory: Callable[[], str] = new_id, commit: bool = True) -> Notification:
    """Create the confirmation for an approval. With commit=False the caller owns the commit."""
    lowest = db.query(func.min(Notification.position)).scalar()
    notification = Notification(
        id=id_factory(),
        position=(lowest if lowest is not None else 0) - 1,
        headline=format_headline(registration),
        details=format_details(registration),
        created_at=registration.notified_at,
    )
    db.add(notification)
    if commit:
        db.commit()
    else:
        db.flush()
    logger.info(f"[EMAIL] to={registration.email} | {notification.headline}")
    logger.info(f"[SMS] to={registration.phone} | {notification.details}")
    return notification


def list_notifications(db: Session, limit: int = None) -> list[Notification]:
    """Dispatch log in stored order, which is newest first."""
    q = db.query(Notification).order_by(Notification.position.asc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()
