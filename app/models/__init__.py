"""SQLAlchemy ORM models."""

from app.models.base import MAX_DB_INT, Base
from app.models.destination import Destination, DestinationType
from app.models.user import User

__all__ = ["MAX_DB_INT", "Base", "Destination", "DestinationType", "User"]
