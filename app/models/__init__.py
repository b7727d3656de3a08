"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.radio_station import RadioStation
from app.models.user import User

__all__ = ["Base", "RadioStation", "User"]
