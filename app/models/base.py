"""SQLAlchemy declarative Base shared by the User and Destination models."""

from sqlalchemy.orm import DeclarativeBase

# Largest value a signed 64-bit INTEGER column or LIMIT/OFFSET can bind.
MAX_DB_INT = 2**63 - 1


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
