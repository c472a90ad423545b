# Parking Command Center — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.registration import Registration      # noqa
from app.models.notification import Notification      # noqa
