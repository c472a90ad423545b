# app/models/notification.py
"""
Notification dispatch log table.
Each row is a synthetic email + SMS confirmation written when a registration is approved.
Rows are never updated or deleted.
"""

from sqlalchemy import Column, Integer, String, Text
from app.database import Base


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(64), primary_key=True)
    # Decreasing sequence: every new row sorts before all older ones
    position = Column(Integer, nullable=False, unique=True, index=True)
    headline = Column(String(200), nullable=False)
    details = Column(Text, nullable=False)
    created_at = Column(String(32), nullable=False)   # registration.notified_at

    def __repr__(self):
        return f"<Notification {self.id} headline={self.headline!r}>"
