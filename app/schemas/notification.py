# app/schemas/notification.py
from pydantic import BaseModel


class NotificationOut(BaseModel):
    id: str
    headline: str
    details: str
    created_at: str

    class Config:
        from_attributes = True
