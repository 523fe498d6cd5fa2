"""ORM model for tourism destinations, each owned by the user who created it."""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class DestinationType(str, enum.Enum):
    """Fixed set of destination categories."""

    BEACH = "Beach"
    MOUNTAIN = "Mountain"
    CITY = "City"
    CULTURAL = "Cultural"
    ADVENTURE = "Adventure"


class Destination(Base):
    """
    Persisted destination.

    last_modif is set by the service on create and on every update;
    user_id cascades when the owning user is deleted or renumbered.
    """

    __tablename__ = "destinations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    country_code = Column(String(2), nullable=False, index=True)
    type = Column(
        Enum(
            DestinationType,
            name="destination_type",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        index=True,
    )
    last_modif = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    owner = relationship("User", back_populates="destinations")
