"""Destination repository: filtered, paginated listing and owner-checked CRUD."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationFailedError
from app.models import MAX_DB_INT, Destination
from app.schemas.destination import DestinationCreate, DestinationFilters, DestinationUpdate
from app.services.ownership import ensure_owner

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Page:
    """One page of destinations plus the numbers needed to render pagination."""

    items: list[Destination]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0


def clamp_limit(limit: int) -> int:
    """Cap limit at MAX_LIMIT; callers reject limit < 1 before getting here."""
    return min(limit, MAX_LIMIT)


def list_destinations(
    db: Session,
    filters: DestinationFilters | None = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Page:
    """
    Return destinations newest first, optionally filtered by exact type and/or country code.

    page is 1-based; offset = (page - 1) * limit. A page past the end is empty
    but still reports the real total.
    """
    if page < 1:
        raise ValidationFailedError("page must be an integer greater than 0")
    if limit < 1:
        raise ValidationFailedError("limit must be an integer greater than 0")
    limit = clamp_limit(limit)
    offset = (page - 1) * limit
    if offset > MAX_DB_INT:
        raise ValidationFailedError("page is too large")

    query = db.query(Destination)
    if filters is not None:
        if filters.type is not None:
            query = query.filter(Destination.type == filters.type)
        if filters.country_code is not None:
            query = query.filter(Destination.country_code == filters.country_code)

    total = query.count()
    items = (
        query.order_by(Destination.created_at.desc(), Destination.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return Page(items=items, page=page, limit=limit, total=total)


def get_destination(db: Session, destination_id: int) -> Destination:
    """Return the destination or raise NotFoundError. Ids no column can hold are simply absent."""
    destination = None
    if 0 < destination_id <= MAX_DB_INT:
        destination = db.get(Destination, destination_id)
    if destination is None:
        raise NotFoundError("Destination not found")
    return destination


def _commit(db: Session, action: str) -> None:
    """Commit; integrity violations are reported as validation failures."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("Integrity error while trying to %s destination: %s", action, e.orig)
        raise ValidationFailedError(f"Could not {action} destination: invalid field values") from e


def create_destination(db: Session, fields: DestinationCreate, owner_id: int) -> Destination:
    """Persist a new destination owned by owner_id. fields are already validated by the schema."""
    destination = Destination(
        name=fields.name,
        description=fields.description,
        country_code=fields.country_code,
        type=fields.type,
        user_id=owner_id,
        last_modif=datetime.now(UTC),
    )
    db.add(destination)
    _commit(db, "create")
    db.refresh(destination)
    logger.info("Created destination id=%s owner=%s", destination.id, owner_id)
    return destination


def update_destination(
    db: Session,
    destination_id: int,
    fields: DestinationUpdate,
    acting_user_id: int,
) -> Destination:
    """
    Apply the provided fields only. NotFoundError if absent, ForbiddenError
    unless acting_user_id is the owner; last_modif is refreshed on success.
    """
    destination = get_destination(db, destination_id)
    ensure_owner(acting_user_id, destination, action="modify")

    for field, value in fields.changes().items():
        setattr(destination, field, value)
    destination.last_modif = datetime.now(UTC)
    _commit(db, "update")
    db.refresh(destination)
    logger.info("Updated destination id=%s by user=%s", destination_id, acting_user_id)
    return destination


def delete_destination(db: Session, destination_id: int, acting_user_id: int) -> None:
    """Permanently remove a destination; same NotFound/Forbidden checks as update."""
    destination = get_destination(db, destination_id)
    ensure_owner(acting_user_id, destination, action="delete")
    db.delete(destination)
    db.commit()
    logger.info("Deleted destination id=%s by user=%s", destination_id, acting_user_id)
